"""
Graph Configuration

탐색 대상 그래프 설정 (pydantic 기반)
"""

from types import MappingProxyType
from typing import Mapping, Tuple
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
import logging

from .errors import GraphConfigError
from .graph.dataset import SAMPLE_ADJACENCY, SAMPLE_START_NODE

logger = logging.getLogger(__name__)


class GraphConfig(BaseModel):
    """그래프 설정"""

    model_config = {"frozen": True}

    adjacency: Mapping[str, Tuple[str, ...]] = Field(
        ...,
        description="노드 ID -> 순서가 있는 이웃 노드 ID 튜플 (읽기 전용)"
    )
    start_node: str = Field(default=SAMPLE_START_NODE, description="탐색 시작 노드")
    require_closed: bool = Field(
        default=True,
        description="모든 이웃이 키로 존재해야 하는지 여부"
    )

    @field_validator("adjacency")
    @classmethod
    def validate_adjacency(cls, v):
        if not v:
            raise ValueError("adjacency must contain at least one node")
        # 내부 매핑과 이웃 목록도 읽기 전용
        return MappingProxyType({node: tuple(adjacent) for node, adjacent in v.items()})

    @model_validator(mode="after")
    def validate_closed(self):
        if not self.require_closed:
            return self

        dangling = [
            f"{node}->{neighbor}"
            for node, adjacent in self.adjacency.items()
            for neighbor in adjacent
            if neighbor not in self.adjacency
        ]
        if dangling:
            raise ValueError(f"neighbors missing from adjacency: {', '.join(dangling)}")

        if self.start_node not in self.adjacency:
            raise ValueError(f"start node {self.start_node!r} is not in adjacency")
        return self

    @classmethod
    def build(cls, **data) -> "GraphConfig":
        """
        설정 생성

        pydantic 검증 오류를 GraphConfigError로 변환합니다.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            logger.error(f"Invalid graph config: {e}")
            raise GraphConfigError(str(e)) from e


DEFAULT_CONFIG = GraphConfig.build(
    adjacency=SAMPLE_ADJACENCY,
    start_node=SAMPLE_START_NODE,
)


def get_default_config() -> GraphConfig:
    """기본 설정 반환 (고정 데이터셋)"""
    return DEFAULT_CONFIG
