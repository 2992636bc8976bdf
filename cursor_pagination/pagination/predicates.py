"""Range predicates selecting the items after a cursor position."""

import re
from typing import Optional, Dict, Any, List, Literal, Mapping, Sequence, Tuple

from pydantic import BaseModel

from .markers import marker_entry

Operator = Literal["eq", "lt", "gt"]

SQL_OPERATORS = {"eq": "=", "lt": "<", "gt": ">"}

_FIELD_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class Predicate(BaseModel):
    """Base class of the filter expression tree."""
    
    model_config = {"frozen": True}
    
    def to_query_dict(self) -> Dict[str, Any]:
        """Render as a nested ``where`` mapping for the query layer."""
        raise NotImplementedError
    
    def to_sql(self, start: int = 1) -> Tuple[str, List[Any]]:
        """Render as a parameterized SQL condition.
        
        Args:
            start: Number of the first ``$n`` placeholder, so the condition
                can be appended to a query that already has parameters
        
        Returns:
            Tuple of (condition, parameters)
        """
        params: List[Any] = []
        clause = self._render_sql(params, start)
        return clause, params
    
    def _render_sql(self, params: List[Any], start: int) -> str:
        raise NotImplementedError


class MatchAll(Predicate):
    """Predicate that accepts every item."""
    
    def to_query_dict(self) -> Dict[str, Any]:
        return {}
    
    def _render_sql(self, params: List[Any], start: int) -> str:
        return "TRUE"


class Comparison(Predicate):
    """``field <op> value``."""
    
    field: str
    op: Operator
    value: Any
    
    def to_query_dict(self) -> Dict[str, Any]:
        if self.op == "eq":
            return {self.field: self.value}
        return {self.field: {self.op: self.value}}
    
    def _render_sql(self, params: List[Any], start: int) -> str:
        if not _FIELD_PATTERN.match(self.field):
            raise ValueError(f"Field name cannot be used in SQL: {self.field!r}")
        params.append(self.value)
        return f"{self.field} {SQL_OPERATORS[self.op]} ${start + len(params) - 1}"


class And(Predicate):
    """Conjunction of predicates."""
    
    conditions: Tuple[Predicate, ...]
    
    def to_query_dict(self) -> Dict[str, Any]:
        fields = [c.field for c in self.conditions if isinstance(c, Comparison)]
        if len(fields) == len(self.conditions) and len(set(fields)) == len(fields):
            merged: Dict[str, Any] = {}
            for condition in self.conditions:
                merged.update(condition.to_query_dict())
            return merged
        return {"AND": [c.to_query_dict() for c in self.conditions]}
    
    def _render_sql(self, params: List[Any], start: int) -> str:
        return "(" + " AND ".join(c._render_sql(params, start) for c in self.conditions) + ")"


class Or(Predicate):
    """Disjunction of predicates."""
    
    conditions: Tuple[Predicate, ...]
    
    def to_query_dict(self) -> Dict[str, Any]:
        return {"OR": [c.to_query_dict() for c in self.conditions]}
    
    def _render_sql(self, params: List[Any], start: int) -> str:
        return "(" + " OR ".join(c._render_sql(params, start) for c in self.conditions) + ")"


def build_range_predicate(
    marker: Optional[Mapping[str, Any]],
    sort: Sequence[str],
    order: Optional[Mapping[str, str]] = None
) -> Predicate:
    """Build the predicate for items strictly after ``marker`` in sort order.
    
    The primary field is compared with ``<`` when its direction is
    ``desc`` and ``>`` otherwise. The direction comes from ``order`` when
    it names the primary field, else from a ``{"desc": value}`` marker
    value. With two or more sort fields, ties on the primary field are
    broken by the secondary field using the same operator; further fields
    are not compared.
    
    Args:
        marker: Field values of the last item already returned
        sort: Sort field names, primary first
        order: Optional field -> direction mapping
    
    Returns:
        Predicate tree; MatchAll when ``sort`` is empty
    
    Raises:
        ValueError: If the marker lacks a compared sort field
    """
    if not sort:
        return MatchAll()
    
    primary = sort[0]
    direction, primary_value = marker_entry(marker, primary)
    if order is not None and primary in order:
        direction = str(order[primary]).lower()
    op = "lt" if direction == "desc" else "gt"
    
    after_primary = Comparison(field=primary, op=op, value=primary_value)
    if len(sort) == 1:
        return after_primary
    
    secondary = sort[1]
    _, secondary_value = marker_entry(marker, secondary)
    
    return Or(conditions=(
        after_primary,
        And(conditions=(
            Comparison(field=primary, op="eq", value=primary_value),
            Comparison(field=secondary, op=op, value=secondary_value),
        )),
    ))
