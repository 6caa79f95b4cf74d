"""Tool, manifest, and caller context schemas.

Two tool shapes coexist:

* ``LegacyTool`` -- a ``parameters`` map plus ``handler(params, auth_context)``.
* ``SchemaTool`` -- a JSON-Schema ``inputSchema``, optional ``annotations``
  and ``execute(input, client)``.

``ToolDefinition`` is the discriminated union of the two, keyed on ``kind``.
Field names are snake_case in Python; the camelCase wire names used by host
surfaces and plugin manifests are accepted and emitted through aliases.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class ParameterSchema(BaseModel):
    """Legacy parameter definition for a tool."""

    type: str  # string, integer, boolean, number, array, object
    description: str | None = None
    required: bool = False
    enum: list[str] | None = None
    default: Any = None


class ToolAnnotations(BaseModel):
    """Behavioural hints attached to a schema-aligned tool."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    read_only_hint: bool | None = Field(default=None, alias="readOnlyHint")


class CallerContext(BaseModel):
    """Authentication/session context handed to every tool invocation."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    user_id: str | None = Field(default=None, alias="userId")
    session_id: str | None = Field(default=None, alias="sessionId")
    roles: list[str] = Field(default_factory=list)
    token: str | None = None

    @field_validator("roles", mode="before")
    @classmethod
    def _roles_default(cls, value: Any) -> Any:
        return [] if value is None else value


class LegacyTool(BaseModel):
    """A tool declared with a ``parameters`` map and a ``handler`` callable."""

    kind: Literal["legacy"] = "legacy"
    name: str
    description: str
    parameters: dict[str, ParameterSchema] = Field(default_factory=dict)
    handler: Callable[..., Any]

    def json_schema(self) -> dict[str, Any]:
        """Convert the parameter map to a JSON-Schema object."""
        properties: dict[str, Any] = {}
        required = []
        for name, param in self.parameters.items():
            prop: dict[str, Any] = {"type": param.type}
            if param.description:
                prop["description"] = param.description
            if param.enum:
                prop["enum"] = param.enum
            if param.default is not None:
                prop["default"] = param.default
            properties[name] = prop
            if param.required:
                required.append(name)
        return {"type": "object", "properties": properties, "required": required}

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.json_schema(),
        }


class SchemaTool(BaseModel):
    """A tool declared with ``inputSchema``/``annotations`` and an ``execute`` callable."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["schema"] = "schema"
    name: str
    description: str
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
    )
    annotations: ToolAnnotations | None = None
    execute: Callable[..., Any]

    def json_schema(self) -> dict[str, Any]:
        return dict(self.input_schema)

    def describe(self) -> dict[str, Any]:
        descriptor: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.json_schema(),
        }
        if self.annotations is not None:
            descriptor["annotations"] = self.annotations.model_dump(
                by_alias=True, exclude_none=True
            )
        return descriptor


ToolDefinition = Annotated[Union[LegacyTool, SchemaTool], Field(discriminator="kind")]

_tool_adapter: TypeAdapter = TypeAdapter(ToolDefinition)


def parse_tool(tool: LegacyTool | SchemaTool | Mapping[str, Any]) -> LegacyTool | SchemaTool:
    """Coerce a tool model or a plain mapping into a ``ToolDefinition``.

    Mappings without an explicit ``kind`` are classified by their callable:
    an ``execute`` key marks the schema-aligned shape, anything else is legacy.
    """
    if isinstance(tool, (LegacyTool, SchemaTool)):
        return tool
    data = dict(tool)
    data.setdefault("kind", "schema" if "execute" in data else "legacy")
    return _tool_adapter.validate_python(data)


class ToolDeclaration(BaseModel):
    """Manifest entry describing a tool without its implementation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    description: str
    parameters: dict[str, ParameterSchema] | None = None
    input_schema: dict[str, Any] | None = Field(default=None, alias="inputSchema")
    annotations: ToolAnnotations | None = None

    @property
    def is_schema_aligned(self) -> bool:
        return self.input_schema is not None


class PluginManifest(BaseModel):
    """The slice of a plugin manifest this package reads."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Any = None
    version: Any = None
    description: Any = None
    webmcp_tools: list[ToolDeclaration] | None = Field(default=None, alias="webmcpTools")
