"""Validation messages for catalog entities.

Messages are part of the public contract: consumers assert on the exact
text, so the constants below must stay byte-for-byte stable. Each constant
has a field-parameterized template counterpart used by the validation
primitives.
"""

NAME_FIELD = "Nome"
DESCRIPTION_FIELD = "Descrição"

NAME_MIN_LENGTH_LIMIT = 3
NAME_MAX_LENGTH_LIMIT = 255
DESCRIPTION_MAX_LENGTH_LIMIT = 10_000

# --- Fixed messages ---

NAME_NULL = "Nome não deve ser vazio ou nulo"
DESCRIPTION_NULL = "Descrição não deve ser vazio ou nulo"
NAME_MAX_LENGTH = "Nome deve ter um tamanho máximo de 255 caracteres."
NAME_MIN_LENGTH = "Nome deve ter um tamanho mínimo de três caracteres."
DESCRIPTION_MAX_LENGTH = "Descrição deve ter um tamanho máximo de 10.000 caracteres."

# Small bounds are written out in words ("três"), larger ones in digits.
_NUMBER_WORDS = {
    1: "um",
    2: "dois",
    3: "três",
    4: "quatro",
    5: "cinco",
    6: "seis",
    7: "sete",
    8: "oito",
    9: "nove",
    10: "dez",
}


def _spell(number: int) -> str:
    return _NUMBER_WORDS.get(number, str(number))


# --- Templates ---


def null_message(field_name: str) -> str:
    """Message for a missing, empty or blank field."""
    return f"{field_name} não deve ser vazio ou nulo"


def min_length_message(field_name: str, minimum: int = NAME_MIN_LENGTH_LIMIT) -> str:
    """Message for a field shorter than ``minimum`` characters.

    Args:
        field_name: Human-readable field label (e.g. ``"Nome"``).
        minimum: The minimum length that was violated.

    Returns:
        The formatted message. With the default bound this equals
        `NAME_MIN_LENGTH` for the ``"Nome"`` label.
    """
    return f"{field_name} deve ter um tamanho mínimo de {_spell(minimum)} caracteres."


def max_length_message(field_name: str) -> str:
    """Message for a field longer than 255 characters (bound is fixed)."""
    return f"{field_name} deve ter um tamanho máximo de 255 caracteres."


def max_length_description_message(field_name: str) -> str:
    """Message for a field longer than 10.000 characters."""
    return f"{field_name} deve ter um tamanho máximo de 10.000 caracteres."
