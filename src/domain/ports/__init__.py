"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import BankSource, ProcessLogger, ReportWriter
"""

from src.domain.ports.bank_source import BankSource
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.report_writer import ReportWriter

__all__ = [
    "BankSource",
    "ProcessLogger",
    "ReportWriter",
]
