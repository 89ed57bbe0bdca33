"""
schema-driven test data for jstream.

a schema is a python structure mirroring the records to generate:
  - 'name'                              -> a faker provider called without arguments
  - ('pyint', {'min_value': 1})         -> a faker provider called with kwargs
  - {'_gen': 'choice', 'from': [...]}   -> one of the given values
  - {'_gen': 'nullable', 'rate': 0.3, 'of': <schema>} -> none with probability rate
  - {'_gen': 'ref', 'key': 'id'}        -> a field generated earlier in the same record
  - {'_gen': 'literal', 'value': x}     -> x itself
  - dict                                -> a record, fields generated in order
  - anything else                       -> used as a literal
"""

from typing import Any, Dict, List, Optional

import numpy as np
from faker import Faker

from jstream import Stream


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_directive(self, config: Dict, context: Dict) -> Any:
        directive = config["_gen"]
        if directive == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if directive == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(np.array(config["from"], dtype=object))
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if directive == "nullable":
            if self._rng.random() < config.get("rate", 0.5):
                return None
            return self.create(config["of"], context)

        if directive == "literal":
            if "value" not in config:
                raise ValueError("_gen 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _gen directive: '{directive}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._resolve_directive(schema, current_context)

            # fields see the ones generated before them
            record: Dict[str, Any] = {}
            for k, v in schema.items():
                record[k] = self.create(v, {**current_context, **record})
            return record

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._resolve_faker_method(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Stream:
        """a stream of count freshly generated records"""
        return Stream.of_array(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
