from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """A single extracted comment. Only ``text`` is guaranteed."""

    text: str
    username: str | None = None
    timestamp: str | None = None
    likes: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Serialize with absent optional fields omitted, never null."""
        payload = {"text": self.text}
        for name in ("username", "timestamp", "likes"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload
