from __future__ import annotations
from typing import Literal, Dict, Any, List, Optional

# -------- Common Data Types --------
RelationshipType = Literal[
    "one-to-one",
    "one-to-many",
    "many-to-many",
]

DEFAULT_RELATIONSHIP_TYPE: RelationshipType = "one-to-many"


def load_objects(
    items: Optional[List[Dict[str, Any]]],
    object_class: type,
    object_name: str = "object"
) -> List[Any]:
    """
    dict 리스트를 객체 리스트로 불러오는 공통 로더.
    Schema.from_dict와 Table.from_dict에서 사용합니다.
    """
    if not items:
        return []

    objects = []
    for i, x in enumerate(items):
        try:
            objects.append(object_class.from_dict(x))
        except Exception as e:
            raise ValueError(f"Failed to load {object_name} at index {i}: {str(e)}")
    return objects


# -------- Serialization Helper Functions --------

def optional_to_dict(obj: Any) -> Any:
    """
    Optional 필드의 to_dict 호출을 위한 헬퍼.
    객체가 None이면 None 반환, 아니면 to_dict() 호출.
    """
    return None if obj is None else obj.to_dict()


def list_to_dict(items: List[Any]) -> List[Dict[str, Any]]:
    """
    객체 리스트를 딕셔너리 리스트로 변환.
    각 객체의 to_dict() 메서드를 호출.
    """
    return [item.to_dict() for item in items]
