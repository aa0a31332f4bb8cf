# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Destination file naming: template variables, random strings, and rendering."""

from __future__ import annotations

import os
import random
import time
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from httphelpers.kernel.exceptions import TemplateRenderException

RANDOM_STRING_CHARACTERS = "abcdefghijklmnopqrstuvwxyz0123456789"

_environment = Environment(undefined=StrictUndefined, autoescape=False)


def random_string(length: int, source: random.Random | None = None) -> str:
    """Return *length* random lowercase alphanumeric characters.

    Not cryptographically secure and not checked for collisions. Without a
    *source*, a generator seeded from the current time is used.
    """
    if source is None:
        source = random.Random(time.time_ns())
    return "".join(source.choice(RANDOM_STRING_CHARACTERS) for _ in range(length))


def file_extension(filename: str) -> str:
    """Return the extension of the last path element, dot included (``.csv``)."""
    base = os.path.basename(filename)
    index = base.rfind(".")
    return base[index:] if index >= 0 else ""


def template_variables(filename: str, size: int, random_value: str) -> dict[str, Any]:
    """Build the variables available to destination name templates."""
    return {
        "fileName": filename,
        "baseFileName": os.path.basename(filename),
        "ext": file_extension(filename),
        "size": size,
        "randomString": random_value,
    }


def render_file_name(template: str, variables: dict[str, Any]) -> str:
    """Render a Jinja2 file name template such as ``{{randomString}}{{ext}}``.

    Referencing a variable that is not defined is an error, not a blank.

    Raises:
        TemplateRenderException: If the template cannot be parsed or rendered.
    """
    try:
        compiled = _environment.from_string(template)
    except TemplateSyntaxError as exc:
        raise TemplateRenderException(
            f"error parsing destination file name template: {exc}",
            code="TEMPLATE_PARSE_ERROR",
            context={"template": template},
        ) from exc

    try:
        return compiled.render(**variables)
    except TemplateError as exc:
        raise TemplateRenderException(
            f"error executing destination file name template: {exc}",
            code="TEMPLATE_RENDER_ERROR",
            context={"template": template},
        ) from exc
