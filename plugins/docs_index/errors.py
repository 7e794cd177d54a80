from mkdocs.exceptions import PluginError


class IndexBuildError(PluginError):
    """Base class for fatal docs_index failures. MkDocs aborts the build on these."""


class SchemaError(IndexBuildError):
    """Front matter is invalid or does not match the page's file location."""


class StructureError(IndexBuildError):
    """The source tree breaks a layout rule (e.g. a section without an overview file)."""


class BrokenReferenceError(IndexBuildError):
    """A {{@link}} or {{@asset}} placeholder points at something not in the index."""
