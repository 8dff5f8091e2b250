"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el validador y por las fuentes de bancos y
no dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from src.domain.shared.text_cleaner import is_blank_line, is_ascii_digit
"""
