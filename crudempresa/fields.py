"""Input field rules and text formatting helpers for the forms."""

from __future__ import annotations

import re
from enum import Enum


class FieldKind(Enum):
    """What characters a form field accepts."""

    LETTERS = "letras"
    NUMBERS = "numeros"
    LETTERS_NUMBERS = "letras_numeros"
    DATE = "data"


_Rule = tuple[re.Pattern[str], str]

_RULES: dict[FieldKind, _Rule] = {
    FieldKind.LETTERS: (re.compile(r"[a-zA-Z]*"), "Somente letras são permitidas"),
    FieldKind.NUMBERS: (re.compile(r"[0-9]*"), "Somente números são permitidos"),
    FieldKind.LETTERS_NUMBERS: (
        re.compile(r"[a-zA-Z0-9]*"),
        "Somente letras e números são permitidos",
    ),
    FieldKind.DATE: (
        re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"),
        "Formato de data inválido. Use DD-MM-AAAA",
    ),
}

_NUMBER_RULES_BY_LABEL: dict[str, _Rule] = {
    "CPF": (
        re.compile(r"[0-9]{3}.[0-9]{3}.[0-9]{3}-[0-9]{2}"),
        "Somente números são permitidos e deve ter 11 dígitos",
    ),
    "CEP": (
        re.compile(r"[0-9]{5}-[0-9]{3}"),
        "Somente números são permitidos e deve ter 8 dígitos",
    ),
}


def _rule(kind: FieldKind, label: str) -> _Rule:
    if kind is FieldKind.NUMBERS and label in _NUMBER_RULES_BY_LABEL:
        return _NUMBER_RULES_BY_LABEL[label]
    return _RULES[kind]


def validate_field(kind: FieldKind, value: str, label: str = "") -> str:
    """Return ``value`` if it fits the field, else raise ValueError with the field's message."""
    pattern, message = _rule(kind, label)
    if pattern.fullmatch(value) is None:
        raise ValueError(message)
    return value


def placeholder(kind: FieldKind, label: str) -> str:
    """Return the hint text shown in an empty field."""
    article = "a" if kind is FieldKind.DATE else "o"
    return f"Digite {article} {label} aqui"


def format_date(data: str) -> str:
    """Reorder a 10-character DD?MM?YYYY date into YYYY/MM/DD."""
    if len(data) != 10:
        return data
    return f"{data[6:10]}/{data[3:5]}/{data[0:2]}"


def format_cpf(cpf: str) -> str:
    """Punctuate an 11-digit CPF; other lengths are returned unchanged."""
    if len(cpf) != 11:
        return cpf
    return f"{cpf[0:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:11]}"


def format_cep(cep: str) -> str:
    """Punctuate an 8-digit CEP; other lengths are returned unchanged."""
    if len(cep) != 8:
        return cep
    return f"{cep[0:5]}-{cep[5:8]}"