# -*- coding: utf-8 -*-
"""Process Booster - psutil process snapshot + priority boost (console + HTTP)"""
