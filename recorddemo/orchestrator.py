"""
Orchestrator for the record semantics demonstration.

Runs a sequence of mutation steps against one record, snapshotting it before
and after every step so each result says which fields changed and whether a
by-copy step leaked into the original.

Usage:
    from recorddemo.orchestrator import run_demo

    demo = run_demo(copy_mode="shallow")
    print(demo.record.describe())

The fixed demonstration order reaches every container while it is still
unallocated, which is what keeps shallow by-copy steps from leaking.
`run_leak_probe` reverses that order on a fresh record to show the leak.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypedDict

from recorddemo.domain.models import Record
from recorddemo.mutations.operations import (
    add_meta_by_copy,
    add_meta_by_reference,
    add_tag_by_copy,
    add_tag_by_reference,
    rename_by_copy,
    rename_by_reference,
)
from recorddemo.mutations.passing import CopyMode, PassingMode, resolve_copy_mode
from recorddemo.utils.logging import get_logger

log = get_logger(__name__)

INITIAL_ID = 1
INITIAL_NAME = "Alice"


@dataclass(frozen=True)
class DemoStep:
    """
    One mutation call in a demonstration sequence.

    Attributes
    ----------
    title : str
        The call as it reads in the transcript.
    mode : PassingMode
        Whether the mutation gets the record or a duplicate of it.
    expectation : str
        What the reader should see on the original afterwards.
    action : Callable[[Record], None]
        The mutation, already bound to its arguments.
    may_leak : bool
        Set on probe steps where a by-copy leak is the point being shown.
    """

    title: str
    mode: PassingMode
    expectation: str
    action: Callable[[Record], None]
    may_leak: bool = False


class StepResult(TypedDict):
    """Observed effect of one step on the original record."""

    title: str
    mode: str
    expectation: str
    before: Dict[str, Any]
    after: Dict[str, Any]
    changed: List[str]
    leaked: bool
    expected_leak: bool
    state: str


@dataclass
class DemoRun:
    """A record together with the results of the steps applied to it."""

    record: Record
    copy_mode: CopyMode
    initial_state: str
    steps: List[StepResult] = field(default_factory=list)

    @property
    def leaked_steps(self) -> List[StepResult]:
        return [step for step in self.steps if step["leaked"]]

    @property
    def has_unexpected_leak(self) -> bool:
        return any(step["leaked"] and not step["expected_leak"] for step in self.steps)


def new_record() -> Record:
    """Create the record every demonstration starts from."""
    return Record(id=INITIAL_ID, name=INITIAL_NAME)


def demo_steps(copy_mode: CopyMode) -> List[DemoStep]:
    """The fixed demonstration sequence. Its order must not change."""
    return [
        DemoStep(
            title='rename_by_copy(record, "Bob")',
            mode=PassingMode.COPY,
            expectation="name NOT changed (passed by copy)",
            action=lambda record: rename_by_copy(record, "Bob", copy_mode=copy_mode),
        ),
        DemoStep(
            title='rename_by_reference(record, "Charlie")',
            mode=PassingMode.REFERENCE,
            expectation="name changed (passed by reference)",
            action=lambda record: rename_by_reference(record, "Charlie"),
        ),
        DemoStep(
            title='add_tag_by_copy(record, "golang")',
            mode=PassingMode.COPY,
            expectation="tag NOT added to the original (appended on the copy)",
            action=lambda record: add_tag_by_copy(record, "golang", copy_mode=copy_mode),
        ),
        DemoStep(
            title='add_tag_by_reference(record, "programmer")',
            mode=PassingMode.REFERENCE,
            expectation="tag added to the original (passed by reference)",
            action=lambda record: add_tag_by_reference(record, "programmer"),
        ),
        DemoStep(
            title='add_meta_by_copy(record, "role", "admin")',
            mode=PassingMode.COPY,
            expectation="meta NOT added to the original (mapping allocated on the copy)",
            action=lambda record: add_meta_by_copy(record, "role", "admin", copy_mode=copy_mode),
        ),
        DemoStep(
            title='add_meta_by_reference(record, "department", "engineering")',
            mode=PassingMode.REFERENCE,
            expectation="meta added to the original (passed by reference)",
            action=lambda record: add_meta_by_reference(record, "department", "engineering"),
        ),
    ]


def probe_steps(copy_mode: CopyMode) -> List[DemoStep]:
    """Allocate each container by reference first, then mutate it by copy."""
    leaks = copy_mode is CopyMode.SHALLOW
    return [
        DemoStep(
            title='add_tag_by_reference(record, "programmer")',
            mode=PassingMode.REFERENCE,
            expectation="tags allocated on the original",
            action=lambda record: add_tag_by_reference(record, "programmer"),
        ),
        DemoStep(
            title='add_tag_by_copy(record, "golang")',
            mode=PassingMode.COPY,
            expectation=(
                "tag LEAKS into the original (shallow copy shares the allocated list)"
                if leaks
                else "tag NOT added to the original (deep copy owns its list)"
            ),
            action=lambda record: add_tag_by_copy(record, "golang", copy_mode=copy_mode),
            may_leak=True,
        ),
        DemoStep(
            title='add_meta_by_reference(record, "department", "engineering")',
            mode=PassingMode.REFERENCE,
            expectation="meta allocated on the original",
            action=lambda record: add_meta_by_reference(record, "department", "engineering"),
        ),
        DemoStep(
            title='add_meta_by_copy(record, "role", "admin")',
            mode=PassingMode.COPY,
            expectation=(
                "meta LEAKS into the original (shallow copy shares the allocated mapping)"
                if leaks
                else "meta NOT added to the original (deep copy owns its mapping)"
            ),
            action=lambda record: add_meta_by_copy(record, "role", "admin", copy_mode=copy_mode),
            may_leak=True,
        ),
    ]


def execute_step(record: Record, step: DemoStep) -> StepResult:
    """
    Apply one step to `record` and compare the record before and after.

    Exceptions raised by the mutation propagate to the caller.
    """
    log.info(f"[STEP START] {step.title}", extra={"step": step.title, "mode": step.mode.value})
    before = record.snapshot()
    step.action(record)
    after = record.snapshot()

    changed = [name for name in before if before[name] != after[name]]
    leaked = step.mode is PassingMode.COPY and bool(changed)

    if leaked and not step.may_leak:
        log.warning(
            f"[STEP LEAKED] {step.title}",
            extra={"step": step.title, "mode": step.mode.value, "changed": changed},
        )
    else:
        log.info(
            f"[STEP DONE] {step.title}",
            extra={"step": step.title, "mode": step.mode.value, "changed": changed, "leaked": leaked},
        )

    return StepResult(
        title=step.title,
        mode=step.mode.value,
        expectation=step.expectation,
        before=before,
        after=after,
        changed=changed,
        leaked=leaked,
        expected_leak=step.may_leak,
        state=record.describe(),
    )


def run_steps(
    steps: List[DemoStep], copy_mode: CopyMode, record: Optional[Record] = None
) -> DemoRun:
    """Run `steps` in order against `record` (a fresh one when None)."""
    target = record if record is not None else new_record()
    demo = DemoRun(
        record=target,
        copy_mode=copy_mode,
        initial_state=target.describe(),
    )
    for step in steps:
        demo.steps.append(execute_step(target, step))

    log.info(
        f"[RUN COMPLETE] {len(demo.steps)} step(s) executed",
        extra={"copy_mode": copy_mode.value, "leaked": len(demo.leaked_steps)},
    )
    return demo


def run_demo(
    copy_mode: Optional[str | CopyMode] = None, record: Optional[Record] = None
) -> DemoRun:
    """
    Run the fixed demonstration sequence.

    Parameters
    ----------
    copy_mode : str | CopyMode | None
        Duplication depth for by-copy steps. Defaults to settings.copy_mode.
    record : Record | None
        Record to mutate. Defaults to a fresh `{id: 1, name: 'Alice'}` record.
    """
    mode = resolve_copy_mode(copy_mode)
    return run_steps(demo_steps(mode), mode, record)


def run_leak_probe(copy_mode: Optional[str | CopyMode] = None) -> DemoRun:
    """Run the probe sequence that lets by-copy steps touch allocated containers."""
    mode = resolve_copy_mode(copy_mode)
    return run_steps(probe_steps(mode), mode)


__all__ = [
    "DemoRun",
    "DemoStep",
    "StepResult",
    "demo_steps",
    "execute_step",
    "new_record",
    "probe_steps",
    "run_demo",
    "run_leak_probe",
    "run_steps",
]
