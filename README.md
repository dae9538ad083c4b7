# doxybook

A library for working with the XML that Doxygen writes: read description
markup into a tree, print that tree as plain text or Markdown, and render
documentation pages from Jinja2 templates.

## Installation

```
pip install doxybook
```

For running the test suite:

```
pip install "doxybook[test]"
pytest
```

## Modules

- `doxybook.xml` — a small reader over XML files. `Xml(path)` opens a
  document (a missing or malformed file raises `XmlError`);
  `Xml.first_child_element(name)` returns the root `Element` if its name
  matches. `Element` offers `first_child_element`, `next_sibling_element`,
  `child_elements`, `nodes` (child elements and text runs in order),
  `attr(name, default)` (a missing attribute without a default raises
  `XmlError`), and the properties `name`, `line`, `text`, `has_text` and
  `document`. Whitespace-only text between tags is ignored.
- `doxybook.xml_text_parser` — turns description elements
  (`<briefdescription>`, `<detaileddescription>`, `<type>` and the like)
  into a tree of `TextNode` objects (`type`, `data`, `extra`, `children`)
  tagged with a `NodeType`. `parse_paras(element)` reads every child of an
  element under a `PARAS` root, `parse_para(element)` reads the element
  itself under a `PARA` root. `str_to_type(name)` maps a tag name to its
  type, printing a warning and returning `NodeType.UNKNOWN` for tags it
  does not know. Attributes such as a link's `url`, a reference's `refid`
  or a section's `kind` are kept in `extra`.
- `doxybook.text_plain_printer` — `TextPlainPrinter().print(node)`
  flattens a text tree to plain text; code lines end with a newline,
  `<sp/>` becomes a space, trailing newlines are removed.
- `doxybook.text_markdown_printer` — `TextMarkdownPrinter(options,
  input_dir, urls).print(node)` writes a text tree as Markdown: headings,
  bold, emphasis, strike-through, nested and ordered lists, tables,
  links, references, inline code, code blocks, images and formulas.
  `urls` maps reference ids to the URLs written for `<ref>` links.
  `MarkdownOptions` holds the settings that change the output:
  `link_and_inline_code_as_html`, `base_url`, `images_folder`,
  `copy_images`, `use_folders`, `output_dir` and the four formula
  delimiters. When `copy_images` is on, images found in `input_dir` are
  copied into the output directory.
- `doxybook.renderer` — `Renderer` loads templates and renders data with
  them. It takes the names of the templates that must exist, optional
  default template sources (a source string, or a `(source,
  dependencies)` pair), an optional directory of `*.tmpl` files (which
  are all loaded and override defaults of the same name), an
  `output_dir`, a `debug_template_json` flag that also writes the data
  as `<file>.json`, and an optional `loader` callable. `render(name,
  data)` returns the text; `render_to_file(name, path, data)` writes it
  below the output directory. Missing templates and rendering failures
  raise `RendererError`.
- `doxybook.utils` — string and filesystem helpers.
- `doxybook.log` — `info`, `warning` and `error` messages;
  `set_quiet_mode(True)` silences the informational ones. Warnings and
  errors go to standard error, coloured when it is a terminal.

## Template functions

Templates can call `isEmpty`, `escape`, `title`, `date`, `stripNamespace`,
`extractQualifiedNameFromFunctionDefinition`, `split`, `first`, `last`,
`get`, `index` (negative indices count from the end), `countProperty`,
`queryProperty`, `replace`, `noop`, `render(name, data)` to render another
loaded template, and `load(refid)`, which hands the id to the `loader`
given to the `Renderer`.

## String helpers

```python
from doxybook import utils

utils.title("functions")                         # "Functions"
utils.safe_anchor_id("Engine::Audio Manager")    # "engineaudio-manager"
utils.strip_namespace("Engine::Audio::Manager")  # "Manager"
utils.escape("a<b>_*")                           # "a&lt;b&gt;&#95;&#42;"
```

`strip_anchor` removes the hash suffix Doxygen appends to member ids,
`extract_qualified_name_from_function_definition` picks the qualified
name out of a full function definition, `split` splits on a delimiter,
`date` formats the current local time with a `strftime` pattern, and
`create_directory` makes a directory unless it already exists.

## What it does not do

There is no command-line program. The package does not read a whole
Doxygen output directory into a tree of classes, namespaces and files,
and does not build the page data for them: the data passed to
`Renderer`, the `urls` given to `TextMarkdownPrinter` and the `loader`
behind `load()` are supplied by the caller. No default page templates are
included.