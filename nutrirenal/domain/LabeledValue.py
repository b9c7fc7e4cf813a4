"""LabeledValue domain entity: one "Label: Value" pair from the patient info or limits sections."""


class LabeledValue:
    def __init__(self, label: str = "", value: str = ""):
        self.label = label
        self.value = value

    @staticmethod
    def from_text(text: str):
        '''Splits at the first colon. Returns None when there is no colon or the label is empty.'''
        label, sep, value = text.partition(":")
        label = label.strip()
        if not sep or not label:
            return None
        return LabeledValue(label, value.strip())

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, LabeledValue):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return LabeledValue(str(d.get("label", "")), str(d.get("value", "")))

    def to_dict(self):
        return {"label": self.label, "value": self.value}
