from __future__ import annotations

from atscore.schemas.jd import JobRequirements
from atscore.schemas.resume import ResumeSections
from atscore.schemas.scoring import GateResult

GATE_SCORE_CAP = 60.0
GATE_IMPACT = "Caps overall score at 60%"
MAX_EXPERIENCE_ENTRIES_REQUIRED = 3


def requirement_met(resume: ResumeSections, requirement: str) -> bool:
    needle = requirement.lower()
    if any(needle in skill.lower() for skill in resume.skills):
        return True
    return any(needle in line.lower() for line in resume.experience)


def experience_years_met(resume: ResumeSections, required_years: int) -> bool:
    # Entry count stands in for tenure; dates are not parsed.
    return len(resume.experience) >= min(required_years / 2, MAX_EXPERIENCE_ENTRIES_REQUIRED)


def evaluate_gates(resume: ResumeSections, requirements: JobRequirements) -> list[GateResult]:
    gates: list[GateResult] = []

    for requirement in requirements.hard_requirements:
        passed = requirement_met(resume, requirement)
        gates.append(
            GateResult(
                rule=f"Hard Requirement: {requirement}",
                passed=passed,
                details="Requirement met" if passed else "Requirement not found in resume",
                impact=None if passed else GATE_IMPACT,
            )
        )

    if requirements.experience_years is not None:
        years = requirements.experience_years
        passed = experience_years_met(resume, years)
        gates.append(
            GateResult(
                rule=f"Minimum {years} years experience",
                passed=passed,
                details="Experience requirement met" if passed else "Insufficient experience indicated",
                impact=None if passed else GATE_IMPACT,
            )
        )

    return gates


def apply_gate_cap(overall: float, gates: list[GateResult]) -> float:
    if any(not gate.passed for gate in gates):
        return min(overall, GATE_SCORE_CAP)
    return overall
