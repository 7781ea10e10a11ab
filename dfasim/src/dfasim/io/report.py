from dataclasses import dataclass, asdict
from datetime import datetime
import json
from typing import Optional

from dfasim.core.types import EvaluationResult


@dataclass
class ResultRecord:
    text: str
    verdict: str
    final_state: int
    trace: list
    failure: Optional[dict]
    dfasim_version: str
    timestamp: str


def to_record(result: EvaluationResult) -> ResultRecord:
    from dfasim import __version__

    failure = None
    if result.failure is not None:
        failure = asdict(result.failure)

    return ResultRecord(
        text=result.text,
        verdict=result.verdict.value,
        final_state=result.final_state,
        trace=[[step.from_state, step.symbol, step.to_state] for step in result.trace],
        failure=failure,
        dfasim_version=__version__,
        timestamp=datetime.now().isoformat(),
    )


def save_records(records: list[ResultRecord], path: str) -> None:
    records_as_dicts = [asdict(record) for record in records]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(records_as_dicts, f, indent=2, ensure_ascii=False)


def load_records(path: str) -> list[ResultRecord]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [ResultRecord(**item) for item in data]
