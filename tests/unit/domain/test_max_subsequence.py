"""
Tests para src.domain.services.max_subsequence

Las dos estrategias (pila monótona y búsqueda repetida del máximo) se
prueban con los mismos casos. La optimalidad se verifica contra fuerza
bruta (todas las combinaciones) para bancos cortos.

Ejemplos del puzzle (4 bancos de 15 baterías):
    987654321111111 → k=2: 98   k=12: 987654321111
    811111111111119 → k=2: 89   k=12: 811111111119
    234234234234278 → k=2: 78   k=12: 434234234278
    818181911112111 → k=2: 92   k=12: 888911112111
"""

import random
from itertools import combinations

import pytest

from src.domain.exceptions import InsufficientLengthError
from src.domain.models.digit_sequence import DigitSequence
from src.domain.services.max_subsequence import select_max, select_max_scan

SELECTORS = [select_max, select_max_scan]

EJEMPLOS_PUZZLE = [
    ("987654321111111", 98, 987654321111),
    ("811111111111119", 89, 811111111119),
    ("234234234234278", 78, 434234234278),
    ("818181911112111", 92, 888911112111),
]


def _seq(text: str) -> DigitSequence:
    return DigitSequence.from_string(text)


def _brute_force_max(digits: tuple[int, ...], k: int) -> int:
    """Máximo valor entre todas las subsecuencias de longitud k."""
    best = 0
    for combo in combinations(digits, k):
        value = 0
        for d in combo:
            value = value * 10 + d
        best = max(best, value)
    return best


@pytest.fixture(params=SELECTORS, ids=lambda s: s.__name__)
def selector(request):
    return request.param


class TestCasosConcretos:
    """Escenarios puntuales, para ambas estrategias."""

    def test_descendente_k2(self, selector):
        assert selector(_seq("987654321111111"), 2).value == 98

    def test_811_k2(self, selector):
        assert selector(_seq("811"), 2).value == 81

    def test_banco_corto_falla(self, selector):
        with pytest.raises(InsufficientLengthError) as exc_info:
            selector(_seq("5"), 2)
        assert exc_info.value.required == 2
        assert exc_info.value.available == 1

    def test_k_igual_a_longitud_devuelve_todo(self, selector):
        sel = selector(_seq("1234"), 4)
        assert sel.digits == (1, 2, 3, 4)
        assert sel.indices == (0, 1, 2, 3)
        assert sel.value == 1234

    def test_k_cero_devuelve_vacio(self, selector):
        sel = selector(_seq("987"), 0)
        assert sel.k == 0
        assert sel.value == 0

    def test_k_cero_con_banco_vacio(self, selector):
        assert selector(DigitSequence(()), 0).value == 0

    def test_banco_vacio_con_k_positivo_falla(self, selector):
        with pytest.raises(InsufficientLengthError) as exc_info:
            selector(DigitSequence(()), 1)
        assert exc_info.value.available == 0

    def test_k_negativo_lanza_value_error(self, selector):
        with pytest.raises(ValueError, match="negativo"):
            selector(_seq("123"), -1)

    def test_k1_elige_el_maximo(self, selector):
        assert selector(_seq("5372"), 1).value == 7

    def test_ascendente(self, selector):
        assert selector(_seq("12345"), 2).value == 45

    def test_todos_iguales(self, selector):
        assert selector(_seq("5555"), 2).value == 55

    def test_con_ceros(self, selector):
        assert selector(_seq("1010"), 2).value == 11

    def test_todos_ceros(self, selector):
        sel = selector(_seq("0000"), 3)
        assert sel.value == 0
        assert str(sel) == "000"

    def test_maximo_al_final_queda_como_ultimo_digito(self, selector):
        """El 9 final no puede ser el primer dígito: no quedarían más."""
        assert selector(_seq("12349"), 3).value == 349

    @pytest.mark.parametrize("linea,esperado_k2,esperado_k12", EJEMPLOS_PUZZLE)
    def test_ejemplos_del_puzzle(self, selector, linea, esperado_k2, esperado_k12):
        assert selector(_seq(linea), 2).value == esperado_k2
        assert selector(_seq(linea), 12).value == esperado_k12

    def test_total_ejemplos_del_puzzle(self, selector):
        bancos = [_seq(linea) for linea, _, _ in EJEMPLOS_PUZZLE]
        assert sum(selector(b, 2).value for b in bancos) == 357
        assert sum(selector(b, 12).value for b in bancos) == 3121910778619

    def test_resultado_grande_no_se_trunca(self, selector):
        """k=40 produce un número de 40 dígitos, más de 128 bits."""
        linea = "9" * 50
        assert selector(_seq(linea), 40).value == 10**40 - 1


class TestDesempate:
    """El desempate es 'más a la izquierda' entre dígitos iguales."""

    def test_k1_primer_maximo(self, selector):
        assert selector(_seq("1919"), 1).indices == (1,)

    def test_iguales_se_quedan_los_primeros(self, selector):
        assert selector(_seq("5555"), 2).indices == (0, 1)

    def test_989(self, selector):
        sel = selector(_seq("989"), 2)
        assert sel.value == 99
        assert sel.indices == (0, 2)

    def test_ambas_estrategias_coinciden_en_indices(self):
        rng = random.Random(2025)
        for _ in range(300):
            length = rng.randint(1, 20)
            text = "".join(rng.choice("0123456789") for _ in range(length))
            k = rng.randint(0, length)
            seq = _seq(text)
            assert select_max(seq, k) == select_max_scan(seq, k), (text, k)


class TestPropiedades:
    """Propiedades generales verificadas sobre bancos aleatorios."""

    @staticmethod
    def _bancos_aleatorios(seed: int, cantidad: int, max_len: int, alfabeto: str):
        rng = random.Random(seed)
        for _ in range(cantidad):
            length = rng.randint(1, max_len)
            yield "".join(rng.choice(alfabeto) for _ in range(length))

    def test_optimalidad_contra_fuerza_bruta(self, selector):
        for text in self._bancos_aleatorios(7, 150, 10, "0123456789"):
            digits = tuple(int(c) for c in text)
            for k in range(1, len(digits) + 1):
                assert selector(_seq(text), k).value == _brute_force_max(digits, k), (
                    text,
                    k,
                )

    def test_optimalidad_con_muchos_empates(self, selector):
        """Alfabeto chico → muchos dígitos repetidos."""
        for text in self._bancos_aleatorios(11, 150, 10, "123"):
            digits = tuple(int(c) for c in text)
            for k in range(1, len(digits) + 1):
                assert selector(_seq(text), k).value == _brute_force_max(digits, k)

    def test_preserva_el_orden(self, selector):
        for text in self._bancos_aleatorios(3, 100, 30, "0123456789"):
            seq = _seq(text)
            for k in range(len(seq) + 1):
                sel = selector(seq, k)
                assert len(sel.digits) == k
                assert all(a < b for a, b in zip(sel.indices, sel.indices[1:]))
                assert all(seq.digits[i] == d for i, d in zip(sel.indices, sel.digits))

    def test_falla_si_y_solo_si_es_corto(self, selector):
        for text in self._bancos_aleatorios(5, 50, 8, "0123456789"):
            seq = _seq(text)
            for k in range(len(seq) + 4):
                if len(seq) < k:
                    with pytest.raises(InsufficientLengthError):
                        selector(seq, k)
                else:
                    selector(seq, k)

    def test_determinismo(self, selector):
        seq = _seq("818181911112111")
        resultados = {selector(seq, 12) for _ in range(5)}
        assert len(resultados) == 1

    def test_banco_largo(self, selector):
        """100 baterías como en la entrada real del puzzle."""
        text = "".join(str((i * 7) % 10) for i in range(100))
        seq = _seq(text)
        sel = selector(seq, 12)
        assert sel.k == 12
        assert sel.value == select_max(seq, 12).value
