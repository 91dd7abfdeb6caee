#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# translation_utils.py - gettext support for localpack messages
#
import gettext

gettext.textdomain("localpack")

def _(text):
    """Translates a message; non-string values pass through untouched"""
    if not isinstance(text, str):
        return text
    return gettext.gettext(text)
