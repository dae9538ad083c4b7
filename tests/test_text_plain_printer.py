from doxybook.text_plain_printer import TextPlainPrinter
from doxybook.xml import Xml
from doxybook.xml_text_parser import NodeType, TextNode, parse_para


def text(value):
    return TextNode(NodeType.TEXT, data=value)


def test_concatenates_text_runs():
    node = TextNode(NodeType.PARA, children=[text("Hello"), text("World")])
    assert TextPlainPrinter().print(node) == "HelloWorld"


def test_formatting_is_ignored():
    bold = TextNode(NodeType.BOLD, children=[text("strong")])
    node = TextNode(NodeType.PARA, children=[text("a "), bold, text(" b")])
    assert TextPlainPrinter().print(node) == "a strong b"


def test_sp_becomes_space_and_codelines_become_lines():
    line1 = TextNode(NodeType.CODELINE, children=[text("int"), TextNode(NodeType.SP), text("x;")])
    line2 = TextNode(NodeType.CODELINE, children=[text("return"), TextNode(NodeType.SP), text("x;")])
    node = TextNode(NodeType.PROGRAMLISTING, children=[line1, line2])
    result = TextPlainPrinter().print(node)
    assert result.split("\n") == ["int x;", "return x;"]


def test_trailing_newlines_are_stripped():
    node = TextNode(NodeType.PARA, children=[text("value\n\n\n")])
    result = TextPlainPrinter().print(node)
    assert result == "value"
    assert not result.endswith("\n")


def test_empty_tree_prints_empty_string():
    assert TextPlainPrinter().print(TextNode(NodeType.PARAS)) == ""


def test_parsed_xml(tmp_path):
    path = tmp_path / "type.xml"
    path.write_text('<type>const <ref refid="classFoo">Foo</ref> &amp;</type>')
    element = Xml(path).first_child_element("type")
    result = TextPlainPrinter().print(parse_para(element))
    assert result == "const Foo &"