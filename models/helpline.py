# models/helpline.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Helpline:
    name: str
    number: str
    description: str
