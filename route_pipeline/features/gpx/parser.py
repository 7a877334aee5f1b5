"""
GPX Track Parser

Extracts ordered track points and route name candidates from GPX text.
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .schemas import GeoPoint

logger = logging.getLogger(__name__)


@dataclass
class ParsedGPX:
    """Result of a single parse pass over a GPX document."""
    points: List[GeoPoint] = field(default_factory=list)
    track_name: Optional[str] = None
    metadata_name: Optional[str] = None
    coerced_coordinates: int = 0


def local_name(element: ET.Element) -> str:
    """Tag without its '{namespace}' prefix."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit('}', 1)[-1]


def parse_xml(gpx_text: str) -> Optional[ET.Element]:
    """
    Parse XML text into a root element.

    Returns:
        Root element, or None when the text is not well-formed XML
    """
    try:
        return ET.fromstring(gpx_text.lstrip('\ufeff \t\r\n'))
    except ET.ParseError as e:
        logger.warning(f"Failed to parse GPX XML: {e}")
        return None


def _parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        result = float(value.strip())
    except ValueError:
        return None
    return result if math.isfinite(result) else None


def _text_content(element: ET.Element) -> str:
    return "".join(element.itertext())


def _first_child_named(root: ET.Element, parent: str, child: str) -> Optional[ET.Element]:
    for element in root.iter():
        if local_name(element) != parent:
            continue
        for sub in element:
            if local_name(sub) == child:
                return sub
    return None


class GPXParser:
    """
    Permissive GPX track parser.

    Every <trkpt> yields a point. Bad lat/lon attributes become 0.0 rather
    than failing the document; bad or missing <ele> leaves elevation unset.
    """

    @staticmethod
    def parse(gpx_text: str) -> ParsedGPX:
        """
        Parse GPX text into points and name candidates.

        Args:
            gpx_text: Raw GPX document

        Returns:
            ParsedGPX; points is empty for malformed XML or a trackless file
        """
        root = parse_xml(gpx_text)
        if root is None:
            return ParsedGPX()

        result = ParsedGPX()
        for point, coerced in GPXParser._iter_track_points(root):
            result.points.append(point)
            result.coerced_coordinates += coerced

        if result.coerced_coordinates:
            logger.warning(
                f"Coerced {result.coerced_coordinates} invalid lat/lon "
                f"attribute(s) to 0.0 across {len(result.points)} track points"
            )

        track_name = _first_child_named(root, "trk", "name")
        if track_name is not None:
            result.track_name = _text_content(track_name)

        metadata_name = _first_child_named(root, "metadata", "name")
        if metadata_name is not None:
            result.metadata_name = _text_content(metadata_name)

        return result

    @staticmethod
    def extract_points(gpx_text: str) -> List[GeoPoint]:
        """
        Extract track points from GPX text.

        Args:
            gpx_text: Raw GPX document

        Returns:
            List of GeoPoint in document order
        """
        return GPXParser.parse(gpx_text).points

    @staticmethod
    def _iter_track_points(root: ET.Element) -> Iterator[tuple]:
        """Yield (GeoPoint, coerced attribute count) per <trkpt>."""
        for element in root.iter():
            if local_name(element) != "trkpt":
                continue

            coerced = 0
            lat = _parse_float(element.get("lat"))
            if lat is None:
                lat = 0.0
                coerced += 1
            lng = _parse_float(element.get("lon"))
            if lng is None:
                lng = 0.0
                coerced += 1

            elevation = None
            for child in element:
                if local_name(child) == "ele":
                    elevation = _parse_float(_text_content(child))
                    break

            yield GeoPoint(lat=lat, lng=lng, elevation=elevation), coerced
