"""ftmspy core operators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from logging import getLogger
from typing import Any

import pydantic

from .exceptions import PipelineConfigurationError, RegistryError, RepeatedIdError
from .models import FTMSData
from .registry import operator_registry

logger = getLogger(__name__)


class BaseOperator(ABC, pydantic.BaseModel):
    """ftmspy base operator which all other operators inherit from.

    Operator parameters are defined as pydantic fields and are validated on assignment. Operators do not
    modify their input: :py:meth:`apply` returns a new data instance.

    """

    id: str = ""
    """The Operator id."""

    model_config = pydantic.ConfigDict(validate_assignment=True)

    def apply(self, data: FTMSData) -> FTMSData:
        """Apply the operator function to the data."""
        if hasattr(self, "pre_apply"):
            self.pre_apply()  # type: ignore

        result = self._apply_operator(data)

        if hasattr(self, "post_apply"):
            self.post_apply()  # type: ignore

        return result

    @abstractmethod
    def _apply_operator(self, data: FTMSData) -> FTMSData: ...


class Pipeline:
    """Compose multiple operators into a single unit.

    Operators are applied in the order in which they were added, each one receiving the output of the
    previous one.

    """

    def __init__(self, id: str) -> None:
        self.id = id
        self.operators: list[BaseOperator | Pipeline] = list()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        equal_ids = self.id == other.id
        equal_operators = self.operators == other.operators
        return equal_ids and equal_operators

    def add_operator(self, operator: BaseOperator | Pipeline) -> None:
        """Add a new operator to the pipeline.

        :param operator: the operator to add
        :raises RepeatedIdError: if the pipeline already contains an element with the same id.
        :raises PipelineConfigurationError: if a nested pipeline is empty.

        """
        if isinstance(operator, Pipeline) and not operator.operators:
            raise PipelineConfigurationError("Nested pipelines cannot be empty")

        if any(x.id == operator.id for x in self.operators):
            msg = f"Pipeline {self.id} already contains an operator with id {operator.id}."
            raise RepeatedIdError(msg)

        self.operators.append(operator)

    def apply(self, data: FTMSData) -> FTMSData:
        """Apply pipeline to the data."""
        for op in self.operators:
            logger.debug(f"Applying `{op.id}` ({op.__class__.__name__}) in pipeline `{self.id}`.")
            data = op.apply(data)
        return data

    @classmethod
    def deserialize(cls, d: dict[str, Any]) -> Pipeline:
        """Deserialize a dictionary into a pipeline.

        :param d: a dictionary created with :py:meth:`serialize`.
        :raises PipelineConfigurationError: if the dictionary is malformed or contains unknown operators.

        """
        id_ = d.get("id")
        if not isinstance(id_, str):
            raise PipelineConfigurationError("`id` is a mandatory field and must be a string.")

        operators = d.get("operators")
        if not isinstance(operators, list):
            raise PipelineConfigurationError("`operators` is a mandatory field and must be a list of dictionaries.")

        pipe = Pipeline(id_)

        for op_dict in operators:
            if not isinstance(op_dict, dict):
                raise PipelineConfigurationError("`operators` element is not a dictionary.")
            op_dict = op_dict.copy()
            op_type = op_dict.pop("class", None)
            if op_type is None:
                op = Pipeline.deserialize(op_dict)
            else:
                try:
                    T = operator_registry.get(op_type)
                except RegistryError as e:
                    raise PipelineConfigurationError(f"Unknown operator class `{op_type}`.") from e
                try:
                    op = T(**op_dict)
                except pydantic.ValidationError as e:
                    raise PipelineConfigurationError(f"Invalid parameters for operator class `{op_type}`.") from e
            pipe.add_operator(op)
        return pipe

    def serialize(self) -> dict:
        """Serialize pipeline into a JSON serializable dictionary."""
        operators = list()
        serialized = {"id": self.id, "operators": operators}
        for op in self.operators:
            if isinstance(op, Pipeline):
                d = op.serialize()
            else:
                d = op.model_dump(mode="json")
                d["class"] = op.__class__.__name__
            operators.append(d)
        return serialized
