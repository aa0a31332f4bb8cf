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
"""XML to dict conversion using the stdlib ``xml.etree.ElementTree``."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any


def element_to_dict(element: ET.Element) -> dict[str, Any] | str | None:
    """Recursively convert an XML element to a dict, string, or None.

    Leaf elements become their text. Repeated sibling elements with the same
    tag name are collected into a list.
    """
    children = list(element)
    if not children:
        return element.text

    result: dict[str, Any] = {}
    for child in children:
        child_value = element_to_dict(child)
        tag = child.tag
        if tag in result:
            existing = result[tag]
            if isinstance(existing, list):
                existing.append(child_value)
            else:
                result[tag] = [existing, child_value]
        else:
            result[tag] = child_value
    return result


def xml_document_content(xml_data: str | bytes) -> dict[str, Any] | str | None:
    """Parse an XML document and return the content of its root element.

    The root tag name itself is dropped, so ``<person><name>A</name></person>``
    becomes ``{"name": "A"}``.
    """
    return element_to_dict(ET.fromstring(xml_data))
