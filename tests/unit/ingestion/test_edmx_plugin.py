from src.ingestion.plugins.edmx_metadata import EdmxMetadataPlugin


def test_edmx_plugin_builds_entity_graph(sample_xml) -> None:
    plugin = EdmxMetadataPlugin()

    graph = plugin.parse(sample_xml, source="metadata.edmx")

    names = [node.name for node in graph.nodes]
    assert names == ["Party", "Customer", "Order", "OrderLine", "Product"]
    customer = graph.nodes[1]
    assert customer.keys == ["Id"]
    assert customer.base_type == "Party"
    assert customer.navigation_properties == ["Orders"]
    assert graph.nodes[0].base_type is None

    relationships = [(e.source, e.relationship, e.target) for e in graph.edges]
    assert ("Customer", "INHERITS_FROM", "Party") in relationships
    assert ("Customer", "NAVIGATES_TO", "Order") in relationships
    assert ("Customer", "FOREIGN_KEY", "Order") in relationships
    assert ("Customer", "REFERENCES", "Region") in relationships
    assert graph.edges[1].navigation_property == "Orders"
    assert graph.edges[1].keys == ["Id"]
    assert graph.edges[0].keys is None

    assert graph.external_refs == ["Region"]
    assert graph.entity_count == 5
    assert graph.relationship_count == 7
    assert graph.source == "metadata.edmx"
    assert graph.error is None
    assert graph.annotation_error is None


def test_edmx_plugin_handles_malformed_document() -> None:
    graph = EdmxMetadataPlugin().parse("<Schema>", source="broken.edmx")

    assert graph.nodes == []
    assert graph.edges == []
    assert graph.error
    assert graph.source == "broken.edmx"


def test_edmx_plugin_falls_back_on_annotation_errors(bad_annotation_xml) -> None:
    graph = EdmxMetadataPlugin().parse(bad_annotation_xml)

    assert [node.name for node in graph.nodes] == ["Good", "Bad"]
    assert "Qualifier" in graph.annotation_error


def test_edmx_plugin_custom_namespace() -> None:
    content = '<Schema xmlns="urn:custom"><EntityType Name="A"/></Schema>'

    graph = EdmxMetadataPlugin(namespace="urn:custom").parse(content)

    assert [node.name for node in graph.nodes] == ["A"]


def test_edmx_plugin_decodes_bytes_from_xml_declaration() -> None:
    content = (
        '<?xml version="1.0" encoding="latin-1"?>'
        '<Schema xmlns="http://docs.oasis-open.org/odata/ns/edm">'
        '<EntityType Name="Caf\xe9"/>'
        "</Schema>"
    ).encode("latin-1")

    graph = EdmxMetadataPlugin().parse(content)

    assert [node.name for node in graph.nodes] == ["Caf\xe9"]


def test_edmx_plugin_handles_metadata_extensions() -> None:
    plugin = EdmxMetadataPlugin()

    assert plugin.handles("service/$metadata.EDMX")
    assert plugin.handles("model.csdl")
    assert not plugin.handles("model.json")
