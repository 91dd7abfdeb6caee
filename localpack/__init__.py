#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# __init__.py - localpack package initialization
#

"""
Release helpers for a local project checkout.
Contains the permission setter and the pack-and-install sequence.
"""

__version__ = "1.0.0"
__author__ = "BigCommunity Team"
