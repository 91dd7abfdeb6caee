#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# core/__init__.py - Core package initialization
#

"""
Core package for localpack.
Contains the permission setter, the package installer and the command runner.
"""
