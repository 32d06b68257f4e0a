# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Issue form parsing."""

from __future__ import annotations

from .parser import NO_RESPONSE_SENTINELS, parse_issue_form

__all__ = ("NO_RESPONSE_SENTINELS", "parse_issue_form")
