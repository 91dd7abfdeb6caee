#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# core/permissions.py - Mark entry scripts executable
#
# Copyright (c) 2025, BigCommunity Team
# All rights reserved.
#

import os
from dataclasses import dataclass
from typing import Optional

from ..config import EXECUTE_BITS
from ..translation_utils import _


@dataclass
class PermissionResult:
    """Per-path outcome; error is set when the path could not be changed"""
    path: str
    mode: Optional[int] = None
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def set_executable(paths, logger, base_dir=None) -> list[PermissionResult]:
    """
    Adds the owner, group and other execute bits to each file in *paths*.

    A failure on one path is logged and recorded, then the next path is
    processed; this function never raises for a single bad path.

    Args:
        paths: Ordered file paths, relative to base_dir unless absolute
        logger: RichLogger instance for output
        base_dir: Directory relative paths are resolved against (default: cwd)

    Returns:
        list: One PermissionResult per input path, in order
    """
    base_dir = base_dir or os.getcwd()
    results = []

    for path in paths:
        full_path = os.path.join(base_dir, path)
        try:
            current_mode = os.stat(full_path).st_mode
            new_mode = current_mode | EXECUTE_BITS
            os.chmod(full_path, new_mode)
        except OSError as e:
            logger.log("red", _("Failed to set executable permissions for: {0} ({1})").format(path, e))
            results.append(PermissionResult(path, error=e))
            continue

        logger.log("green", _("Set executable permissions for: {0}").format(path))
        results.append(PermissionResult(path, mode=new_mode & 0o7777))

    return results
