# -*- coding: utf-8 -*-
"""
security

Field level permission checks.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .handler import NoopSecurityHandler, RoleSecurityHandler, SecurityHandler

__all__ = ["NoopSecurityHandler", "RoleSecurityHandler", "SecurityHandler"]

# The End
