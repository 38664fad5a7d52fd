"""
Graph Validator

그래프 구조 검증 (닫힘, 대칭성 등)
"""

from typing import Dict, Any, List
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import logging

from .stores.base import GraphStore

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """검증 심각도"""
    ERROR = "error"       # 치명적 오류
    WARNING = "warning"   # 경고
    INFO = "info"         # 정보


@dataclass
class ValidationIssue:
    """검증 이슈"""
    severity: ValidationSeverity
    code: str
    message: str
    node: Any = None


@dataclass
class ValidationResult:
    """검증 결과"""
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    validated_at: str = ""

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def add(self, severity: ValidationSeverity, code: str, message: str, node: Any = None) -> None:
        self.issues.append(ValidationIssue(
            severity=severity,
            code=code,
            message=message,
            node=node
        ))
        if severity == ValidationSeverity.ERROR:
            self.valid = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "issues": [
                {
                    "severity": i.severity.value,
                    "code": i.code,
                    "message": i.message,
                    "node": i.node,
                }
                for i in self.issues
            ]
        }


class GraphValidator:
    """그래프 검증기"""

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: 엄격 모드 (경고도 에러로 처리)
        """
        self.strict = strict

    def validate(self, store: GraphStore) -> ValidationResult:
        """
        그래프 검증

        Args:
            store: 검증할 그래프 저장소

        Returns:
            검증 결과
        """
        result = ValidationResult(
            valid=True,
            validated_at=datetime.now().isoformat()
        )

        for node in store.nodes():
            adjacent = store.neighbors(node)

            if not adjacent:
                result.add(
                    ValidationSeverity.INFO,
                    "ISOLATED_NODE",
                    f"{node!r} has no neighbors",
                    node
                )

            seen = set()
            for neighbor in adjacent:
                if neighbor in seen:
                    result.add(
                        ValidationSeverity.WARNING,
                        "DUPLICATE_NEIGHBOR",
                        f"{node!r} lists {neighbor!r} more than once",
                        node
                    )
                    continue
                seen.add(neighbor)

                if neighbor == node:
                    result.add(
                        ValidationSeverity.INFO,
                        "SELF_LOOP",
                        f"{node!r} is its own neighbor",
                        node
                    )
                    continue

                if not store.has_node(neighbor):
                    result.add(
                        ValidationSeverity.ERROR,
                        "DANGLING_NEIGHBOR",
                        f"{node!r} -> {neighbor!r}: neighbor is not a node of the graph",
                        node
                    )
                elif node not in store.neighbors(neighbor):
                    result.add(
                        ValidationSeverity.WARNING,
                        "ASYMMETRIC_EDGE",
                        f"{node!r} -> {neighbor!r} has no reverse edge",
                        node
                    )

        # 엄격 모드에서 경고 처리
        if self.strict and result.warnings:
            issues, result.issues = result.issues, []
            for issue in issues:
                if issue.severity == ValidationSeverity.WARNING:
                    result.add(
                        ValidationSeverity.ERROR,
                        issue.code,
                        f"[Strict] {issue.message}",
                        issue.node
                    )
                else:
                    result.issues.append(issue)

        if not result.valid:
            logger.warning(f"Graph validation failed with {len(result.errors)} errors")

        return result
