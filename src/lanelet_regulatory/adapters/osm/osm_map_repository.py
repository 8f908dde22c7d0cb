"""Lanelet2 OSM-XML map repository."""

import logging
from pathlib import Path
from typing import Any

from lxml import etree

from lanelet_regulatory.domain.errors import InvalidInputError, MapParseError, UnknownSubtypeError
from lanelet_regulatory.domain.lanelet_map import LaneletMap, MapLoadResult
from lanelet_regulatory.domain.models import (
    AttributeName,
    AttributeValue,
    LineString3d,
    LoadIssue,
    Point3d,
    Polygon3d,
    Primitive,
    RegulatoryElementData,
    RuleParameter,
    RuleParameters,
)
from lanelet_regulatory.domain.regulatory_elements import RegulatoryElementRegistry

logger = logging.getLogger(__name__)

# Node tags holding metric coordinates (as written by Autoware map tools)
LOCAL_X_TAG = "local_x"
LOCAL_Y_TAG = "local_y"
ELEVATION_TAG = "ele"
AREA_TAG = "area"
_COORDINATE_TAGS = {LOCAL_X_TAG, LOCAL_Y_TAG, ELEVATION_TAG}
_TRUE_VALUES = {"true", "yes", "1"}

GENERATOR = "lanelet_regulatory"


def _tags(element: Any) -> dict[str, str]:
    return {tag.get("k"): tag.get("v", "") for tag in element.iterfind("tag") if tag.get("k")}


def _parse_id(element: Any) -> int:
    raw_id = element.get("id")
    try:
        return int(raw_id)
    except (TypeError, ValueError) as e:
        raise MapParseError(
            f"Invalid id {raw_id!r} on <{element.tag}> at line {element.sourceline}"
        ) from e


def _parse_float(value: str | None, what: str, element_id: int) -> float:
    if value is None:
        raise MapParseError(f"Missing {what} on node {element_id}")
    try:
        return float(value)
    except ValueError as e:
        raise MapParseError(f"Invalid {what} {value!r} on node {element_id}") from e


def _format_float(value: float) -> str:
    return repr(float(value))


class OsmMapRepository:
    """Loads and saves lanelet maps in the Lanelet2 OSM-XML format.

    Nodes become points, ways become line strings (or polygons when tagged
    ``area=true``) and relations tagged ``type=regulatory_element`` are
    reconstructed through the registry. Other relations, such as lanelets,
    are skipped.

    In strict mode the first malformed regulatory element aborts the load.
    Otherwise it is logged, reported as a LoadIssue and left out of the map.
    """

    def __init__(self, registry: RegulatoryElementRegistry, strict: bool = False) -> None:
        self._registry = registry
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def load(self, path: str | Path) -> MapLoadResult:
        """Load a map from an OSM file.

        Raises:
            FileNotFoundError: If the file does not exist.
            MapParseError: If the file is not a well-formed lanelet map.
        """
        map_path = Path(path)
        if not map_path.exists():
            raise FileNotFoundError(f"Map file not found: {map_path}")
        logger.info(f"Loading lanelet map from {map_path}")
        return self.parse(map_path.read_bytes())

    def parse(self, content: bytes | str) -> MapLoadResult:
        """Parse OSM-XML content into a map."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
        try:
            root = etree.fromstring(content, parser=parser)
        except etree.XMLSyntaxError as e:
            raise MapParseError(f"Invalid map XML: {e}") from e
        if root.tag != "osm":
            raise MapParseError(f"Expected <osm> root element, found <{root.tag}>")

        lanelet_map = LaneletMap()
        issues: list[LoadIssue] = []

        for node in root.iterfind("node"):
            point = self._parse_node(node)
            lanelet_map.points[point.id] = point

        for way in root.iterfind("way"):
            primitive = self._parse_way(way, lanelet_map)
            if isinstance(primitive, Polygon3d):
                lanelet_map.polygons[primitive.id] = primitive
            else:
                lanelet_map.line_strings[primitive.id] = primitive

        for relation in root.iterfind("relation"):
            self._parse_relation(relation, lanelet_map, issues)

        logger.info(
            f"Loaded {len(lanelet_map.regulatory_elements)} regulatory element(s) "
            f"with {len(issues)} issue(s)"
        )
        return MapLoadResult(lanelet_map=lanelet_map, issues=issues)

    def _parse_node(self, node: Any) -> Point3d:
        node_id = _parse_id(node)
        tags = _tags(node)
        has_x, has_y = LOCAL_X_TAG in tags, LOCAL_Y_TAG in tags
        if has_x != has_y:
            missing = LOCAL_Y_TAG if has_x else LOCAL_X_TAG
            raise MapParseError(f"Node {node_id} has no {missing} tag")
        x_value: str | None
        y_value: str | None
        if has_x:
            x_value, y_value = tags[LOCAL_X_TAG], tags[LOCAL_Y_TAG]
        else:
            x_value, y_value = node.get("lon"), node.get("lat")
        if x_value is None or y_value is None:
            raise MapParseError(f"Node {node_id} has no coordinates")
        return Point3d(
            id=node_id,
            x=_parse_float(x_value, "x coordinate", node_id),
            y=_parse_float(y_value, "y coordinate", node_id),
            z=_parse_float(tags.get(ELEVATION_TAG, "0"), "elevation", node_id),
            attributes={k: v for k, v in tags.items() if k not in _COORDINATE_TAGS},
        )

    def _parse_way(self, way: Any, lanelet_map: LaneletMap) -> LineString3d | Polygon3d:
        way_id = _parse_id(way)
        refs = [nd.get("ref") for nd in way.iterfind("nd")]
        points = []
        for ref in refs:
            try:
                points.append(lanelet_map.points[int(ref)])
            except (KeyError, TypeError, ValueError) as e:
                raise MapParseError(f"Way {way_id} references unknown node {ref!r}") from e

        tags = _tags(way)
        if tags.get(AREA_TAG, "").lower() in _TRUE_VALUES:
            # Polygons are stored closed in OSM, the closing node is implicit here
            if len(points) > 1 and points[0].id == points[-1].id:
                points = points[:-1]
            attributes = {k: v for k, v in tags.items() if k != AREA_TAG}
            return Polygon3d(id=way_id, points=tuple(points), attributes=attributes)
        return LineString3d(id=way_id, points=tuple(points), attributes=tags)

    def _parse_relation(
        self, relation: Any, lanelet_map: LaneletMap, issues: list[LoadIssue]
    ) -> None:
        relation_id = _parse_id(relation)
        tags = _tags(relation)
        if tags.get(AttributeName.TYPE.value) != AttributeValue.REGULATORY_ELEMENT.value:
            logger.debug(
                f"Skipping relation {relation_id} of type '{tags.get(AttributeName.TYPE.value)}'"
            )
            return

        parameters: dict[str, RuleParameters] = {}
        for member in relation.iterfind("member"):
            role = member.get("role", "")
            primitive = self._resolve_member(member, lanelet_map)
            if primitive is None:
                self._report(
                    issues,
                    relation_id,
                    MapParseError(
                        f"Regulatory element {relation_id} references unsupported or unknown "
                        f"{member.get('type')} {member.get('ref')} in role '{role}'"
                    ),
                )
                return
            parameters.setdefault(role, []).append(RuleParameter.of(primitive))

        data = RegulatoryElementData(id=relation_id, parameters=parameters, attributes=tags)
        try:
            element = self._registry.create(data)
        except (InvalidInputError, UnknownSubtypeError) as e:
            self._report(issues, relation_id, e)
            return
        logger.debug(f"Reconstructed {type(element).__name__} {relation_id}")
        lanelet_map.regulatory_elements[relation_id] = element

    def _resolve_member(self, member: Any, lanelet_map: LaneletMap) -> Primitive | None:
        member_type = member.get("type")
        try:
            ref = int(member.get("ref"))
        except (TypeError, ValueError):
            return None
        if member_type == "node":
            return lanelet_map.points.get(ref)
        if member_type == "way":
            if ref in lanelet_map.line_strings:
                return lanelet_map.line_strings[ref]
            return lanelet_map.polygons.get(ref)
        return None

    def _report(self, issues: list[LoadIssue], element_id: int, error: Exception) -> None:
        if self._strict:
            raise error
        logger.warning(f"Skipping regulatory element {element_id}: {error}")
        issues.append(LoadIssue(element_id=element_id, reason=str(error)))

    def save(self, lanelet_map: LaneletMap, path: str | Path) -> None:
        """Write a map to an OSM file."""
        map_path = Path(path)
        map_path.write_bytes(self.serialize(lanelet_map))
        logger.info(f"Saved lanelet map to {map_path}")

    def serialize(self, lanelet_map: LaneletMap) -> bytes:
        """Serialize a map to OSM-XML.

        Raises:
            ValueError: If a line string and a polygon share an id, since both
                are written as ways.
        """
        # Elements may reference primitives that were never added to the map directly
        complete_map = LaneletMap()
        for layer in (lanelet_map.points, lanelet_map.line_strings, lanelet_map.polygons):
            for primitive in layer.values():
                complete_map.add(primitive)
        for element in lanelet_map.regulatory_elements.values():
            complete_map.add(element)

        shared_ids = complete_map.line_strings.keys() & complete_map.polygons.keys()
        if shared_ids:
            raise ValueError(f"Line strings and polygons share way ids: {sorted(shared_ids)}")

        root = etree.Element("osm", version="0.6", generator=GENERATOR)

        for point in sorted(complete_map.points.values(), key=lambda p: p.id):
            node = etree.SubElement(root, "node", id=str(point.id), visible="true", version="1")
            self._add_tags(node, point.attributes)
            self._add_tags(
                node,
                {
                    LOCAL_X_TAG: _format_float(point.x),
                    LOCAL_Y_TAG: _format_float(point.y),
                    ELEVATION_TAG: _format_float(point.z),
                },
            )

        for line_string in sorted(complete_map.line_strings.values(), key=lambda ls: ls.id):
            way = self._add_way(root, line_string.id, [p.id for p in line_string.points])
            self._add_tags(way, line_string.attributes)

        for polygon in sorted(complete_map.polygons.values(), key=lambda poly: poly.id):
            refs = [p.id for p in polygon.points]
            way = self._add_way(root, polygon.id, refs + refs[:1])
            self._add_tags(way, {**polygon.attributes, AREA_TAG: "true"})

        for element_id, element in sorted(complete_map.regulatory_elements.items()):
            relation = etree.SubElement(
                root, "relation", id=str(element_id), visible="true", version="1"
            )
            for role, params in element.parameters().items():
                for parameter in params:
                    member_type = "node" if isinstance(parameter.value, Point3d) else "way"
                    etree.SubElement(
                        relation,
                        "member",
                        type=member_type,
                        ref=str(parameter.value.id),
                        role=str(role),
                    )
            self._add_tags(relation, element.attributes)

        return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")

    @staticmethod
    def _add_way(root: Any, way_id: int, refs: list[int]) -> Any:
        way = etree.SubElement(root, "way", id=str(way_id), visible="true", version="1")
        for ref in refs:
            etree.SubElement(way, "nd", ref=str(ref))
        return way

    @staticmethod
    def _add_tags(element: Any, tags: dict[str, str]) -> None:
        for key, value in tags.items():
            etree.SubElement(element, "tag", k=str(key), v=str(value))
