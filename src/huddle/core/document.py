"""Rich text document model.

A document is an ordered list of insert operations. Text inserts carry
optional inline attributes (``bold``, ``italic``, ``strike``, ``code``,
``link``). Line attributes (``list``, ``blockquote``) live on the ``"\\n"``
insert that ends the line. A normalized document always ends with a newline.

The JSON form, ``{"ops": [...]}``, is what the editor hands to its submit
callback as the message body.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Union

from ..utils.errors import InvalidDocumentError



@dataclass(frozen=True)
class Op:
    """A single insert operation."""

    insert: Union[str, dict]
    attributes: Optional[dict] = None

    @property
    def is_text(self) -> bool:
        return isinstance(self.insert, str)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"insert": self.insert}
        if self.attributes:
            data["attributes"] = dict(self.attributes)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Op":
        if not isinstance(data, dict):
            raise InvalidDocumentError(f"Operation must be a mapping, got {type(data).__name__}")

        if "insert" not in data:
            unknown = ", ".join(sorted(data)) or "empty operation"
            raise InvalidDocumentError(f"Only insert operations are allowed in a document ({unknown})")

        insert = data["insert"]
        if isinstance(insert, str):
            if not insert:
                raise InvalidDocumentError("Text inserts cannot be empty")
        elif not isinstance(insert, dict) or len(insert) != 1:
            raise InvalidDocumentError("Embed inserts must be a single-key mapping")

        attributes = data.get("attributes")
        if attributes is not None and not isinstance(attributes, dict):
            raise InvalidDocumentError("Operation attributes must be a mapping")

        return cls(insert=insert, attributes=dict(attributes) if attributes else None)


@dataclass
class Delta:
    """An ordered list of insert operations."""

    ops: list[Op] = field(default_factory=list)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def insert(self, value: Union[str, dict], attributes: Optional[dict] = None) -> "Delta":
        """Append an insert, merging with the previous op when formats match."""

        if isinstance(value, str) and not value:
            return self

        attributes = {k: v for k, v in (attributes or {}).items() if v not in (None, False)}
        attributes = attributes or None

        if self.ops and isinstance(value, str):
            last = self.ops[-1]
            if last.is_text and last.attributes == attributes:
                self.ops[-1] = Op(last.insert + value, attributes)
                return self

        self.ops.append(Op(value, attributes))
        return self

    def ensure_trailing_newline(self) -> "Delta":
        if not self.ops or not (self.ops[-1].is_text and self.ops[-1].insert.endswith("\n")):
            self.insert("\n")
        return self

    def to_ops(self) -> list[dict]:
        return [op.to_dict() for op in self.ops]

    def to_json(self) -> str:
        """Serialize to the message body format."""
        return json.dumps({"ops": self.to_ops()}, ensure_ascii=False)

    def plain_text(self) -> str:
        """Text content of the document, embeds skipped."""
        text = "".join(op.insert for op in self.ops if op.is_text)
        return text if text.endswith("\n") else text + "\n"

    def has_embeds(self) -> bool:
        return any(not op.is_text for op in self.ops)

    def is_blank(self) -> bool:
        """True when there is nothing but whitespace."""
        if self.has_embeds():
            return False
        return not self.plain_text().strip()

    @classmethod
    def from_ops(cls, ops: Iterable[Any]) -> "Delta":
        delta = cls()
        for raw in ops:
            op = Op.from_dict(raw)
            delta.insert(op.insert, op.attributes)
        return delta.ensure_trailing_newline()

    @classmethod
    def from_json(cls, body: str) -> "Delta":
        try:
            data = json.loads(body)
        except (TypeError, json.JSONDecodeError) as e:
            raise InvalidDocumentError(f"Document body is not valid JSON: {e}") from e
        return cls.from_value(data)

    @classmethod
    def from_value(cls, value: "RichDocument") -> "Delta":
        """Normalize any accepted document shape into a Delta."""

        if value is None:
            return cls().ensure_trailing_newline()
        if isinstance(value, Delta):
            return cls.from_ops(value.to_ops())
        if isinstance(value, str):
            return cls.from_json(value)
        if isinstance(value, dict):
            if "ops" not in value or not isinstance(value["ops"], list):
                raise InvalidDocumentError("Document mapping must contain an 'ops' list")
            return cls.from_ops(value["ops"])
        if isinstance(value, (list, tuple)):
            return cls.from_ops(value)

        raise InvalidDocumentError(f"Unsupported document type: {type(value).__name__}")


RichDocument = Union[Delta, list, tuple, dict, str, None]
