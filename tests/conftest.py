"""Shared fixtures for EDM metadata tests."""

import xml.etree.ElementTree as ET

import pytest

from src.metadata.extractor import EdmExtractor

SAMPLE_METADATA = """<?xml version="1.0" encoding="utf-8"?>
<edmx:Edmx Version="4.0" xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="NS" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EntityType Name="Party">
        <Key><PropertyRef Name="PartyId"/></Key>
        <Property Name="PartyId" Type="Edm.Int64"/>
      </EntityType>
      <EntityType Name="Customer" BaseType="NS.Party">
        <Key><PropertyRef Name="Id"/></Key>
        <Property Name="Id" Type="Edm.Int32">
          <Annotation Term="AX.Mandatory" Bool="true"/>
        </Property>
        <Property Name="Name" Type="Edm.String">
          <Annotation Term="AX.DataType">
            <EnumMember>AX.Type/String</EnumMember>
          </Annotation>
        </Property>
        <NavigationProperty Name="Orders" Type="Collection(NS.Order)" Partner="Customer">
          <ReferentialConstraint Property="CustomerId" ReferencedProperty="Id"/>
        </NavigationProperty>
        <ReferentialConstraint ReferencedEntityType="NS.Region"/>
        <ReferentialConstraint ReferencedEntityType=""/>
      </EntityType>
      <EntityType Name="Order">
        <Key><PropertyRef Name="OrderId"/></Key>
        <Property Name="OrderId" Type="Edm.Int32"/>
        <Property Name="CustomerId" Type="Edm.Int32"/>
        <NavigationProperty Name="Customer" Type="NS.Customer" Nullable="false" Partner="Orders"/>
        <NavigationProperty Name="Lines" Type="Collection(NS.OrderLine)"/>
      </EntityType>
      <EntityType Name="OrderLine">
        <Property Name="Quantity" Type="Edm.Decimal"/>
        <NavigationProperty Name="Product" Type="NS.Product" Nullable="True"/>
      </EntityType>
      <EntityType Name="Product">
        <Key><PropertyRef Name="Sku"/></Key>
        <Property Name="Sku" Type="Edm.String"/>
      </EntityType>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>
"""

BAD_ANNOTATION_METADATA = """<Schema xmlns="http://docs.oasis-open.org/odata/ns/edm">
  <EntityType Name="Good">
    <Property Name="Id" Type="Edm.Int32"/>
  </EntityType>
  <EntityType Name="Bad">
    <Property Name="Code" Type="Edm.String">
      <Annotation Term="AX.Flag" Qualifier="x"/>
    </Property>
  </EntityType>
</Schema>
"""


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_METADATA


@pytest.fixture
def sample_root() -> ET.Element:
    return ET.fromstring(SAMPLE_METADATA)


@pytest.fixture
def bad_annotation_xml() -> str:
    return BAD_ANNOTATION_METADATA


@pytest.fixture
def extractor() -> EdmExtractor:
    return EdmExtractor()


@pytest.fixture
def metadata_file(tmp_path):
    path = tmp_path / "metadata.edmx"
    path.write_text(SAMPLE_METADATA, encoding="utf-8")
    return path
