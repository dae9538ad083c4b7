"""Rendering of JSON-like page data through named templates."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import jinja2

from . import log, utils

_SUFFIX = ".tmpl"


class RendererError(Exception):
    """Raised when a template cannot be loaded or rendered."""


def _trim_path(path: str) -> str:
    path = path.rstrip("/").rstrip("\\")
    for prefix in (".\\", "./"):
        if path.startswith(prefix):
            path = path[2:]
    return path


def _strip_tmpl_suffix(name: str) -> str:
    if len(name) > 4 and name.endswith(_SUFFIX):
        return name[: -len(_SUFFIX)]
    return name


def _template_files(directory: str) -> dict[str, str]:
    """Map template names to the paths of the '.tmpl' files in a directory."""
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        raise RendererError(f"Failed to read directory {directory}") from exc
    found = {}
    for entry in entries:
        path = os.path.join(directory, entry)
        if entry.endswith(_SUFFIX) and os.path.isfile(path):
            found[os.path.splitext(entry)[0]] = path
    return found


def _normalize_defaults(
    defaults: Mapping[str, str | tuple[str, Iterable[str]]] | None,
) -> dict[str, tuple[str, tuple[str, ...]]]:
    result = {}
    for name, value in (defaults or {}).items():
        if isinstance(value, str):
            result[name] = (value, ())
        else:
            source, dependencies = value
            result[name] = (source, tuple(dependencies))
    return result


class _TemplateLoader(jinja2.BaseLoader):
    """Finds templates in the template directory first, then among the defaults."""

    def __init__(self, files: Mapping[str, str], defaults: Mapping[str, tuple[str, tuple[str, ...]]]):
        self._files = files
        self._defaults = defaults

    def get_source(self, environment, template):
        name = _strip_tmpl_suffix(template)
        path = self._files.get(name)
        if path is not None:
            with open(path, encoding="utf-8") as handle:
                source = handle.read()
            mtime = os.path.getmtime(path)

            def uptodate() -> bool:
                return os.path.exists(path) and os.path.getmtime(path) == mtime

            return source, path, uptodate
        default = self._defaults.get(name)
        if default is not None:
            return default[0], None, lambda: True
        raise jinja2.TemplateNotFound(template)


def _index(items, idx: int):
    return items[idx] if idx >= 0 else items[len(items) + idx]


def _count_property(items, key: str, value: str) -> int:
    return sum(1 for obj in items if obj[key] == value)


def _query_property(items, key: str, value: str) -> list:
    return [obj for obj in items if obj[key] == value]


def _replace(text: str, what: str, sub: str) -> str:
    if not what:
        raise ValueError("replace: the text to replace must not be empty")
    return text.replace(what, sub)


def _is_empty(text: str) -> bool:
    if not isinstance(text, str):
        raise TypeError("isEmpty expects a string")
    return not text


class Renderer:
    """Loads the templates a documentation build needs and renders pages with them.

    `template_names` are the templates that must exist. `default_templates`
    maps a name to its source, or to a (source, dependencies) pair.
    Every '.tmpl' file in `templates_path` is loaded too and overrides a
    default of the same name. `loader` resolves a refid into page data for
    the `load()` template function.
    """

    def __init__(
        self,
        template_names: Iterable[str],
        default_templates: Mapping[str, str | tuple[str, Iterable[str]]] | None = None,
        templates_path: str | os.PathLike | None = None,
        output_dir: str | os.PathLike = ".",
        debug_template_json: bool = False,
        loader: Callable[[str], Any] | None = None,
    ):
        self.output_dir = os.fspath(output_dir)
        self.debug_template_json = debug_template_json
        self._loader = loader
        self._templates: dict[str, jinja2.Template] = {}

        defaults = _normalize_defaults(default_templates)
        include_prefix = ""
        files: dict[str, str] = {}
        if templates_path is not None:
            include_prefix = _trim_path(os.fspath(templates_path)) + os.sep
            files = _template_files(include_prefix)
        log.info(f"Using lookup template path: '{include_prefix}'")

        self._env = jinja2.Environment(
            loader=_TemplateLoader(files, defaults),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.globals.update(self._functions())

        loaded: set[str] = set()
        in_progress: set[str] = set()

        def load_dependency(name: str) -> None:
            if name in loaded or name in in_progress:
                return
            in_progress.add(name)
            try:
                default = defaults.get(name)
                if default is not None:
                    for dependency in default[1]:
                        load_dependency(dependency)
                if name in files:
                    log.info(f"Parsing template: '{name}' from file: '{files[name]}'")
                elif default is not None:
                    log.info(f"Parsing template: '{name}' from default")
                else:
                    raise RendererError(f"No template provided for: '{name}'")
                self._templates[_strip_tmpl_suffix(name)] = self._env.get_template(name)
                loaded.add(name)
            except Exception as exc:
                raise RendererError(f"Failed to load template: '{name}' error: {exc}") from exc
            finally:
                in_progress.discard(name)

        for name in dict.fromkeys(template_names):
            load_dependency(name)

        # Templates reachable only through render("<name>", data) must be loaded upfront.
        for name, path in files.items():
            if name in loaded:
                continue
            try:
                log.info(f"Parsing template: '{name}' from file: '{path}'")
                self._templates[name] = self._env.get_template(name + _SUFFIX)
            except Exception as exc:
                raise RendererError(f"Failed to load template: '{name}' error: {exc}") from exc

    def _functions(self) -> dict[str, Callable]:
        return {
            "isEmpty": _is_empty,
            "escape": utils.escape,
            "title": utils.title,
            "date": utils.date,
            "stripNamespace": utils.strip_namespace,
            "extractQualifiedNameFromFunctionDefinition": (
                utils.extract_qualified_name_from_function_definition
            ),
            "split": utils.split,
            "first": lambda items: items[0],
            "last": lambda items: items[-1],
            "get": lambda obj, key: obj[key],
            "index": _index,
            "countProperty": _count_property,
            "queryProperty": _query_property,
            "render": self.render,
            "load": self._load,
            "replace": _replace,
            "noop": lambda: "",
        }

    def _load(self, refid: str):
        if self._loader is None:
            raise RendererError(f"No loader available to load {refid}")
        return self._loader(refid)

    def _find(self, name: str) -> jinja2.Template:
        key = _strip_tmpl_suffix(name)
        template = self._templates.get(key)
        if template is None:
            raise RendererError(f"Template {key} not found")
        return template

    def render(self, name: str, data: Mapping[str, Any]) -> str:
        """Render the named template with `data` and return the text."""
        template = self._find(name)
        try:
            return template.render(data)
        except Exception as exc:
            raise RendererError(f"Failed to render template '{name}' error {exc}") from exc

    def render_to_file(self, name: str, path: str | os.PathLike, data: Mapping[str, Any]) -> None:
        """Render the named template into `path` under the output directory."""
        template = self._find(name)
        abs_path = os.path.join(self.output_dir, os.fspath(path))
        if self.debug_template_json:
            try:
                with open(abs_path + ".json", "w", encoding="utf-8") as dump:
                    json.dump(data, dump, indent=2)
            except OSError:
                pass
        try:
            handle = open(abs_path, "w", encoding="utf-8")
        except OSError as exc:
            raise RendererError(f"Failed to open file for writing {abs_path}") from exc
        log.info(f"Rendering {abs_path}")
        with handle:
            try:
                handle.write(template.render(data))
            except Exception as exc:
                raise RendererError(f"Render template '{name}' error {exc}") from exc