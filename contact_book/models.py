from dataclasses import dataclass, asdict

CATEGORIES = ('family', 'friend', 'work', 'other')
FIELDS = ('name', 'phone', 'email', 'category')


@dataclass
class Contact:
    name: str
    phone: str
    email: str
    category: str

    @classmethod
    def from_dict(cls, data):
        return cls(**{field: data[field] for field in FIELDS})

    def to_dict(self):
        return asdict(self)
