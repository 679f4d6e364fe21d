"""
schema-driven fake records for tests.

a schema is a dict of field -> spec, where spec is one of:
    'word'                                   a faker provider name
    ('pyint', {'min_value': 1})              a faker provider with kwargs
    {'_provider': 'choice', 'from': [...]}   a random pick from a list
    {'_provider': 'literal', 'value': x}     x as-is
    [item_spec]                              a list of 1-3 items built from item_spec
    {...}                                    a nested record
"""

import numpy as np
from faker import Faker
from typing import Any, Dict, Optional
from seqops import from_iterable, Enumerable


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            # numpy returns numpy scalars, tests want plain python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._provider(schema)
            return {key: self.create(spec) for key, spec in schema.items()}

        if isinstance(schema, list):
            if not schema: return []
            count = int(self._rng.integers(1, 3, endpoint=True))
            return [self.create(schema[0]) for _ in range(count)]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
