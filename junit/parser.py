"""
JUnit XML parser.

A report file is either a <testsuites> document wrapping any number of <testsuite> elements
or a bare <testsuite> document. Both variants are tried in this order, the first one
that matches the root element wins.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from junit import (
    CLASSNAME_ATTR,
    ERROR,
    FAILURE,
    MESSAGE_ATTR,
    NAME_ATTR,
    SKIPPED,
    TESTCASE,
    TESTSUITE,
    TESTSUITES,
    TIME_ATTR,
    TIMESTAMP_ATTR,
)
from junit.model import Marker, RawSuite, RawTestCase
from shared.errors import XMLFormatError


def local_name(tag: str) -> str:
    """Tag without namespace i.e. `{urn:x}testsuite` -> `testsuite`"""
    return tag.rsplit("}", 1)[-1]


def children(element: ET.Element, tag: str) -> List[ET.Element]:
    """Direct children with given local name, document order"""
    return [child for child in element if local_name(child.tag) == tag]


def char_data(element: ET.Element) -> str:
    """Character data of the element itself, text of nested elements is not included"""
    parts: List[str] = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def decode_marker(element: ET.Element) -> Marker:
    return Marker(message=element.get(MESSAGE_ATTR, ""), content=char_data(element))


def decode_test_case(element: ET.Element) -> RawTestCase:
    return RawTestCase(
        classname=element.get(CLASSNAME_ATTR, ""),
        name=element.get(NAME_ATTR, ""),
        failures=[decode_marker(e) for e in children(element, FAILURE)],
        errors=[decode_marker(e) for e in children(element, ERROR)],
        skips=[decode_marker(e) for e in children(element, SKIPPED)],
    )


def decode_suite_element(element: ET.Element) -> RawSuite:
    return RawSuite(
        name=element.get(NAME_ATTR, ""),
        timestamp=element.get(TIMESTAMP_ATTR, ""),
        time=element.get(TIME_ATTR, ""),
        testCases=[decode_test_case(e) for e in children(element, TESTCASE)],
    )


def decode_suites(root: ET.Element) -> Optional[List[RawSuite]]:
    """<testsuites> variant, None when the root is something else"""
    if local_name(root.tag) != TESTSUITES:
        return None
    return [decode_suite_element(e) for e in children(root, TESTSUITE)]


def decode_single_suite(root: ET.Element) -> Optional[List[RawSuite]]:
    """<testsuite> variant wrapped in one element list, None when the root is something else"""
    if local_name(root.tag) != TESTSUITE:
        return None
    return [decode_suite_element(root)]


DECODERS: List[Callable[[ET.Element], Optional[List[RawSuite]]]] = [decode_suites, decode_single_suite]


def parse_report(content: bytes, path: Path) -> List[RawSuite]:
    """
    Decode one report file
    :param content: raw bytes of the file
    :param path: file the bytes come from, used in error messages only
    :return: suites in document order
    """
    try:
        root: ET.Element = ET.fromstring(content)
    except ET.ParseError as e:
        raise XMLFormatError(f"Failed to parse XML from file {path}: {e}") from e
    for decoder in DECODERS:
        suites = decoder(root)
        if suites is not None:
            logger.debug(f"{path}: {len(suites)} suites decoded by {decoder.__name__}")
            return suites
    raise XMLFormatError(
        f"Failed to parse XML from file {path}: root element <{local_name(root.tag)}> "
        f"is neither <{TESTSUITES}> nor <{TESTSUITE}>"
    )
