# bnfront/grammar/ast.py
"""Grammar 모델
- Literal / Range / Choice : 단말(terminal) 기호
- NonTerminal              : 규칙 이름 참조 (전방 참조 허용, 검증하지 않음)
- Rule                     : 이름 + 기호 시퀀스. `|` 대안마다 Rule 하나
- Grammar                  : Rule 의 순서 있는 목록 (선언 순서가 의미를 가짐)
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from typing         import Iterator, List, Tuple, Union

@dataclass(frozen=True)
class Literal:
    value: str      # 코드포인트 1개

@dataclass(frozen=True)
class Range:
    # inclusive. start <= end 는 검사하지 않는다
    start: str
    end: str

ChoiceItem = Union[Literal, Range]

@dataclass(frozen=True)
class Choice:
    """`[...]` 문자 클래스. items 순서 = 선언 순서 (순서 있는 대안)"""
    items: Tuple[ChoiceItem, ...] = ()

@dataclass(frozen=True)
class NonTerminal:
    name: str

Terminal = Union[Literal, Choice]
Symbol = Union[Literal, Choice, NonTerminal]


@dataclass
class Rule:
    """
    규칙 하나(대안 하나).
    - name   : 비단말 이름. 빈 상태에서 정확히 한 번만 설정 가능
    - symbols: 파싱 중에 뒤로 계속 붙는다
    """
    name: str = ""
    symbols: List[Symbol] = field(default_factory=list)

    def __setattr__(self, key, value) -> None:
        if key == "name" and getattr(self, "name", ""):
            raise AttributeError(f"rule name already set to {self.name!r}")
        object.__setattr__(self, key, value)


@dataclass
class Grammar:
    rules: List[Rule] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __getitem__(self, i: int) -> Rule:
        return self.rules[i]

    def names(self) -> List[str]:
        """규칙 이름(중복 제거, 선언 순서)"""
        seen = set()
        out: List[str] = []
        for r in self.rules:
            if r.name not in seen:
                out.append(r.name); seen.add(r.name)
        return out

    def alternatives(self, name: str) -> List[Rule]:
        return [r for r in self.rules if r.name == name]
