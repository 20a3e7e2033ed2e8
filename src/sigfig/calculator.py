"""
Calculator — Диспетчер вычислений по JSON контракту

Принимает calculation_request (dict), проверяет контракт, вызывает операцию
движка и возвращает calculation_result (dict).

ПОРЯДОК:
1. JSON Schema запроса (нарушение → jsonschema.ValidationError)
2. CalculationRequest (pydantic)
3. Арность и обязательные параметры операции (→ InvalidArgument)
4. Вызов операции; SigfigError → результат с ok=False и error_kind
5. JSON Schema результата

Ошибки движка не пробрасываются: они становятся частью результата.
Нарушения контракта пробрасываются вызывающему.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final, Optional, Union

from src.sigfig.contracts.validators import (
    CalculationRequestValidator,
    CalculationResultValidator,
)
from src.sigfig.domain.calculation import (
    CalculationOperation,
    CalculationRequest,
    CalculationResult,
)
from src.sigfig.domain.precision import PercentageOptions
from src.sigfig.errors import InvalidArgument, SigfigError
from src.sigfig.math import arithmetic, formatting, notation
from src.sigfig.math.rounding import to_sigfig
from src.sigfig.math.significant_figures import digits_after_decimal, sigfig_of

logger = logging.getLogger(__name__)

CalculationValue = Union[str, int]


# =============================================================================
# OPERATION REGISTRY
# =============================================================================


@dataclass(frozen=True)
class OperationSpec:
    """
    Описание операции для диспетчера.

    Attributes:
        handler: Вызов операции движка по запросу
        arity: Точное число операндов (None — любое, для max/min)
        requires_sigfigs: Операция не имеет значения sigfigs по умолчанию
        requires_places: Операция требует places
    """

    handler: Callable[[CalculationRequest], CalculationValue]
    arity: Optional[int]
    requires_sigfigs: bool = False
    requires_places: bool = False


def _binary(operation: Callable[..., str]) -> OperationSpec:
    return OperationSpec(
        handler=lambda r: operation(r.operands[0], r.operands[1], r.sigfigs),
        arity=2,
    )


def _unary(operation: Callable[..., str]) -> OperationSpec:
    return OperationSpec(handler=lambda r: operation(r.operands[0], r.sigfigs), arity=1)


def _variadic(operation: Callable[..., str]) -> OperationSpec:
    return OperationSpec(handler=lambda r: operation(list(r.operands), r.sigfigs), arity=None)


def _round(request: CalculationRequest) -> str:
    threshold = request.threshold if request.threshold is not None else 5
    return formatting.round(request.operands[0], request.sigfigs, threshold)


def _percentage(request: CalculationRequest) -> str:
    options = PercentageOptions(sigfigs=request.sigfigs, append_percent=request.append_percent)
    return formatting.percentage(request.operands[0], request.operands[1], options)


OPERATIONS: Dict[CalculationOperation, OperationSpec] = {
    # Арифметика
    CalculationOperation.ADD: _binary(arithmetic.add),
    CalculationOperation.SUB: _binary(arithmetic.sub),
    CalculationOperation.MUL: _binary(arithmetic.mul),
    CalculationOperation.DIV: _binary(arithmetic.div),
    CalculationOperation.MOD: _binary(arithmetic.mod),
    CalculationOperation.IDIV: _binary(arithmetic.idiv),
    CalculationOperation.POW: _binary(arithmetic.pow),
    CalculationOperation.SQRT: _unary(arithmetic.sqrt),
    CalculationOperation.ABS: _unary(arithmetic.abs),
    CalculationOperation.MAX: _variadic(arithmetic.max),
    CalculationOperation.MIN: _variadic(arithmetic.min),
    # Форматирование
    CalculationOperation.ROUND: OperationSpec(handler=_round, arity=1, requires_sigfigs=True),
    CalculationOperation.TRUNCATE: OperationSpec(
        handler=lambda r: formatting.truncate(r.operands[0], r.sigfigs),
        arity=1,
        requires_sigfigs=True,
    ),
    CalculationOperation.TO_SIGFIG: OperationSpec(
        handler=lambda r: to_sigfig(r.operands[0], r.sigfigs),
        arity=1,
        requires_sigfigs=True,
    ),
    CalculationOperation.TO_SCIENTIFIC: _unary(notation.to_scientific),
    CalculationOperation.TO_ENGINEERING: _unary(notation.to_engineering),
    CalculationOperation.TO_FIXED: OperationSpec(
        handler=lambda r: formatting.to_digits_after_decimal(r.operands[0], r.places),
        arity=1,
        requires_places=True,
    ),
    CalculationOperation.PERCENTAGE: OperationSpec(handler=_percentage, arity=2),
    # Анализ
    CalculationOperation.SIGFIG_OF: OperationSpec(
        handler=lambda r: sigfig_of(r.operands[0]), arity=1
    ),
    CalculationOperation.DIGITS_AFTER_DECIMAL: OperationSpec(
        handler=lambda r: digits_after_decimal(r.operands[0]), arity=1
    ),
}


# =============================================================================
# CALCULATOR
# =============================================================================


class Calculator:
    """
    Диспетчер вычислений.

    Экземпляр не хранит состояния между вызовами; валидаторы схем
    создаются один раз.
    """

    def __init__(
        self,
        request_validator: Optional[CalculationRequestValidator] = None,
        result_validator: Optional[CalculationResultValidator] = None,
    ):
        self._request_validator = request_validator or CalculationRequestValidator()
        self._result_validator = result_validator or CalculationResultValidator()

    def _check_request(self, request: CalculationRequest, spec: OperationSpec) -> None:
        operation = request.operation.value
        if spec.arity is not None and len(request.operands) != spec.arity:
            raise InvalidArgument(
                f"Operation '{operation}' expects {spec.arity} operand(s), "
                f"got {len(request.operands)}"
            )
        if spec.requires_sigfigs and request.sigfigs is None:
            raise InvalidArgument(f"Operation '{operation}' requires sigfigs")
        if spec.requires_places and request.places is None:
            raise InvalidArgument(f"Operation '{operation}' requires places")

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """
        Выполнение типизированного запроса.

        Returns:
            CalculationResult: ok=True со значением или ok=False с видом ошибки
        """
        spec = OPERATIONS[request.operation]
        try:
            self._check_request(request, spec)
            value = spec.handler(request)
        except SigfigError as e:
            logger.warning(
                "Calculation '%s' rejected (%s): %s", request.operation.value, e.kind.value, e
            )
            return CalculationResult.failure(request.operation, e.kind, str(e))

        return CalculationResult.success(request.operation, value)

    def evaluate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Выполнение запроса в форме calculation_request.

        Args:
            payload: Данные запроса (dict)

        Returns:
            Данные calculation_result (dict)

        Raises:
            jsonschema.ValidationError: Если запрос не соответствует контракту
        """
        violations = self._request_validator.describe_errors(payload)
        if violations:
            logger.warning("Calculation request violates contract: %s", "; ".join(violations))
            self._request_validator.validate(payload)

        request = CalculationRequest.model_validate(payload)
        logger.debug(
            "Calculation request: %s with %d operand(s)",
            request.operation.value,
            len(request.operands),
        )

        data = self.calculate(request).model_dump(mode="json")
        self._result_validator.validate(data)
        return data


_DEFAULT_CALCULATOR: Final[Calculator] = Calculator()


def evaluate(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Выполнение запроса экземпляром Calculator по умолчанию."""
    return _DEFAULT_CALCULATOR.evaluate(payload)
