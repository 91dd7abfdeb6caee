#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# __main__.py - Allows running `python -m localpack`
#

import sys

from .main import main

sys.exit(main())
