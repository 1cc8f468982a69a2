# -*- coding: utf-8 -*-
"""
TangoTest/Backend/src/api/v1/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты API: единый формат ответа.
"""

from .responses import ApiResponse, error_payload

__all__ = ["ApiResponse", "error_payload"]
