import pytest

from doxybook.xml import Element, Xml, XmlError

DOCUMENT = """<?xml version="1.0"?>
<doxygen version="1">
  <compounddef kind="class" id="classFoo">
    <compoundname>Foo</compoundname>
    <briefdescription><para>Hello <bold>big</bold> world</para></briefdescription>
    <sectiondef kind="public-func"/>
    <sectiondef kind="private-func"/>
    <empty>   </empty>
  </compounddef>
</doxygen>
"""


@pytest.fixture
def xml_file(tmp_path):
    path = tmp_path / "classFoo.xml"
    path.write_text(DOCUMENT)
    return path


@pytest.fixture
def compounddef(xml_file):
    doc = Xml(xml_file)
    return doc.first_child_element("doxygen").first_child_element("compounddef")


def test_root_element(xml_file):
    doc = Xml(xml_file)
    root = doc.first_child_element("doxygen")
    assert root.name == "doxygen"
    assert doc.first_child_element(None).name == "doxygen"
    assert doc.first_child_element("other") is None
    assert doc.path == str(xml_file)


def test_attributes(compounddef):
    assert compounddef.attr("kind") == "class"
    assert compounddef.attr("missing", "fallback") == "fallback"
    assert compounddef.attr("id", "fallback") == "classFoo"


def test_missing_attribute_raises(compounddef):
    with pytest.raises(XmlError, match="missing"):
        compounddef.attr("missing")


def test_text(compounddef):
    name = compounddef.first_child_element("compoundname")
    assert name.has_text
    assert name.text == "Foo"
    assert not compounddef.has_text
    assert compounddef.text == ""


def test_whitespace_only_text_is_dropped(compounddef):
    empty = compounddef.first_child_element("empty")
    assert not empty.has_text
    assert list(empty.nodes()) == []


def test_line_numbers(compounddef):
    assert compounddef.line == 3
    assert compounddef.first_child_element("compoundname").line == 4


def test_document_reference(xml_file, compounddef):
    assert compounddef.document.path == str(xml_file)


def test_first_child_element_missing(compounddef):
    assert compounddef.first_child_element("nothing") is None


def test_next_sibling_element(compounddef):
    first = compounddef.first_child_element("sectiondef")
    second = first.next_sibling_element("sectiondef")
    assert second.attr("kind") == "private-func"
    assert second.next_sibling_element("sectiondef") is None
    assert second.next_sibling_element().name == "empty"


def test_child_elements(compounddef):
    kinds = [e.attr("kind") for e in compounddef.child_elements("sectiondef")]
    assert kinds == ["public-func", "private-func"]
    names = [e.name for e in compounddef.child_elements()]
    assert names == ["compoundname", "briefdescription", "sectiondef", "sectiondef", "empty"]


def test_nodes_mix_text_and_elements(compounddef):
    para = compounddef.first_child_element("briefdescription").first_child_element("para")
    nodes = list(para.nodes())
    assert nodes[0] == "Hello "
    assert isinstance(nodes[1], Element) and nodes[1].name == "bold"
    assert nodes[2] == " world"
    assert len(nodes) == 3


def test_invalid_xml_raises(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<doxygen><unclosed></doxygen>")
    with pytest.raises(XmlError):
        Xml(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(XmlError):
        Xml(tmp_path / "absent.xml")