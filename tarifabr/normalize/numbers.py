"""Parsing de números no formato brasileiro (vírgula decimal)."""

from __future__ import annotations

import math
from typing import Any


def parse_decimal_br(valor: Any) -> float | None:
    """
    Converte string com vírgula decimal para float.

    Args:
        valor: "0,72518", "465,11", número ou None

    Returns:
        float, ou None se não for possível converter

    Examples:
        >>> parse_decimal_br("0,72518")
        0.72518
        >>> parse_decimal_br("") is None
        True
    """
    if valor is None or isinstance(valor, bool):
        return None

    if isinstance(valor, int | float):
        resultado = float(valor)
    else:
        texto = str(valor).strip()
        if not texto:
            return None
        # "1.234,56" -> "1234.56"; "0,72518" -> "0.72518"
        if "," in texto:
            texto = texto.replace(".", "").replace(",", ".")
        try:
            resultado = float(texto)
        except ValueError:
            return None

    if math.isnan(resultado) or math.isinf(resultado):
        return None
    return resultado
