import json
import re

from fabrica.core.interfaces.query import Query
from fabrica.query import register_dialect
from fabrica.query.builder import QueryBuilder
from fabrica.query.values import QuerySpec

OPERATORS = {
    "=": None,
    "!=": "$ne",
    "<": "$lt",
    "<=": "$lte",
    ">": "$gt",
    ">=": "$gte",
}

_COLLECTION_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class MongoQuery(Query):
    """Renders as a mongo shell `find` expression."""

    dialect = "mongo"

    def __init__(self, spec: QuerySpec):
        self._spec = spec

    @property
    def spec(self) -> QuerySpec:
        return self._spec

    def render(self) -> str:
        spec = self._spec
        if _COLLECTION_NAME.fullmatch(spec.table):
            collection = f"db.{spec.table}"
        else:
            collection = f"db.getCollection({json.dumps(spec.table)})"

        args = [json.dumps(self._filter())]
        if spec.columns:
            projection = {c: 1 for c in spec.columns}
            # find() returns _id unless it is excluded explicitly
            if "_id" not in projection:
                projection["_id"] = 0
            args.append(json.dumps(projection))
        text = f"{collection}.find({', '.join(args)})"
        if spec.order_by:
            text += f".sort({json.dumps({o.column: -1 if o.descending else 1 for o in spec.order_by})})"
        if spec.limit:
            text += f".limit({spec.limit})"
        return text

    def _filter(self) -> dict:
        spec = self._spec
        # MongoDB reads limit(0) as "no limit"; an always-false filter keeps LIMIT 0 semantics.
        if spec.limit == 0:
            return {"$expr": False}
        if spec.predicate is None:
            return {}
        pred = spec.predicate
        op = OPERATORS[pred.operator]
        if op is None:
            return {pred.column: pred.value.value}
        return {pred.column: {op: pred.value.value}}

    def __eq__(self, other):
        return isinstance(other, MongoQuery) and other._spec == self._spec

    def __hash__(self):
        return hash((self.dialect, self._spec))

    def __repr__(self):
        return f"MongoQuery({self._spec!r})"


@register_dialect("mongo")
def _build_mongo_builder(**kwargs):
    return QueryBuilder("mongo", MongoQuery, **kwargs)
