"""Documentation record a publisher exposes to its host."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FieldDoc(BaseModel):
    """Summary of one configuration field."""

    name: str
    summary: str
    required: bool = True


class Documentation(BaseModel):
    """Descriptive metadata: purpose, an example, output type, field summaries."""

    description: str
    example: str = ""
    output: str = ""
    fields: list[FieldDoc] = Field(default_factory=list)

    def field(self, name: str) -> FieldDoc:
        """Look up a field summary by name. Raises KeyError if absent."""
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(f"No documentation for field '{name}'")


def render_documentation(doc: Documentation, *, title: str = "") -> str:
    """Format a Documentation record as markdown for terminals and docs sites."""
    sections: list[str] = []
    if title:
        sections.append(f"# {title}")
    sections.append(doc.description)
    if doc.output:
        sections.append(f"Output: `{doc.output}`")
    if doc.example:
        sections.append(f"## Example\n```hcl\n{doc.example.strip()}\n```")
    if doc.fields:
        lines = ["## Fields"]
        for f in doc.fields:
            marker = "required" if f.required else "optional"
            lines.append(f"- `{f.name}` ({marker}): {f.summary}")
        sections.append("\n".join(lines))
    return "\n\n".join(sections)
