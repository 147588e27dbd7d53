from typing import Any, Dict, Iterable, List

from pydantic import BaseModel


def dump(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json")


def dump_all(models: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    return [dump(m) for m in models]
