"""Errors raised at the validation and storage boundaries."""


class ValidationError(ValueError):
    """An insert payload was malformed or carried fields outside its allow-list."""

    def __init__(self, fields, errors=None):
        self.fields = list(fields)
        self.errors = errors or []
        super().__init__(f"Invalid fields: {', '.join(self.fields)}")

    @classmethod
    def from_pydantic(cls, exc):
        errors = exc.errors()
        fields = []
        for err in errors:
            name = ".".join(str(part) for part in err["loc"]) or "__root__"
            if name not in fields:
                fields.append(name)
        return cls(fields, errors)


class ConstraintViolationError(Exception):
    """The database refused a row (unique or foreign-key constraint)."""

    def __init__(self, table: str, detail: str):
        self.table = table
        self.detail = detail
        super().__init__(f"{table}: {detail}")
