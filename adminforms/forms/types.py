# -*- coding: utf-8 -*-
"""
types

Form type keys understood by the form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class FormType:
    """Registered form type keys.

    ``COLLECTION`` is the plain form-library collection; mappers swap it for
    ``ADMIN_COLLECTION`` which knows how to embed an associated admin.
    """

    FORM = "form"
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    URL = "url"
    PASSWORD = "password"
    HIDDEN = "hidden"
    INTEGER = "integer"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    CHOICE = "choice"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    COLLECTION = "collection"
    ADMIN_COLLECTION = "admin_collection"
    ADMIN = "admin"
    MODEL = "model"
    MODEL_LIST = "model_list"
    MODEL_HIDDEN = "model_hidden"
    MODEL_AUTOCOMPLETE = "model_autocomplete"

    MODEL_TYPES = (MODEL, MODEL_LIST, MODEL_HIDDEN, MODEL_AUTOCOMPLETE)

# The End
