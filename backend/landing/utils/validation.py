import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def coerce_model(
    model_cls: Type[M],
    raw: Any,
    *,
    label: Optional[str] = None,
    fallback: Optional[Mapping[str, Any]] = None,
) -> M:
    """
    Build `model_cls` from a partial or legacy mapping without failing.

    Top-level fields whose values do not validate are replaced by the
    value in `fallback` (once), or dropped so the model default takes
    their place. Every replacement is logged.

    Only models whose fields all carry defaults can be coerced from
    arbitrary input; anything else re-raises the ValidationError.
    """
    name = label or model_cls.__name__

    if isinstance(raw, model_cls):
        return raw.model_copy(deep=True)

    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    elif raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        logger.warning("Ignoring non-object %s: %r", name, raw)
        raw = {}

    data = dict(raw)
    restored = set()

    while True:
        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            invalid = {
                error["loc"][0]
                for error in exc.errors()
                if error["loc"] and error["loc"][0] in data
            }
            if not invalid:
                raise

            logger.warning("Replacing invalid %s fields: %s", name, sorted(invalid))
            for key in invalid:
                if fallback is not None and key in fallback and key not in restored:
                    data[key] = fallback[key]
                    restored.add(key)
                else:
                    data.pop(key)
