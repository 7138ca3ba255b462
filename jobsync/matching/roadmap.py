from __future__ import annotations

import math

from jobsync.core.scoring import get_scoring_value
from jobsync.schemas import RoadmapItem, RoadmapMilestone, SkillGap

_SKILL_RESOURCES: dict[str, list[str]] = {
    "React.js": ["React Official Docs", "Full Stack Open", "React Projects on GitHub"],
    "Node.js": ["Node.js Documentation", "Express.js Tutorial", "Backend Projects"],
    "MongoDB": ["MongoDB University", "Mongoose Documentation", "Database Design Course"],
    "Problem Solving": ["LeetCode", "HackerRank", "Daily Coding Challenges"],
    "Team Leadership": ["Leadership Courses", "Team Management Books", "Leadership Workshops"],
    "Communication": ["Presentation Skills Course", "Technical Writing", "Public Speaking Practice"],
}
_DEFAULT_RESOURCES = ["Online Courses", "Practice Projects", "Industry Resources"]


def skill_resources(skill_name: str) -> list[str]:
    return list(_SKILL_RESOURCES.get(skill_name, _DEFAULT_RESOURCES))


def skill_milestones(skill_name: str, gap: int) -> list[RoadmapMilestone]:
    step = int(get_scoring_value("roadmap.milestone_step", 20))
    return [
        RoadmapMilestone(
            week=index * 2,
            target=f"{skill_name} - Level {index}",
            description="Complete foundational concepts and practical exercises",
        )
        for index in range(1, math.ceil(gap / step) + 1)
    ]


def build_skill_roadmap(skill_gaps: list[SkillGap]) -> list[RoadmapItem]:
    min_gap = int(get_scoring_value("roadmap.min_gap", 20))
    high_gap = int(get_scoring_value("roadmap.high_priority_gap", 40))
    roadmap: list[RoadmapItem] = []
    for skill in sorted(skill_gaps, key=lambda item: item.gap, reverse=True):
        if skill.gap <= min_gap:
            continue
        high = skill.gap > high_gap
        roadmap.append(
            RoadmapItem(
                skill=skill.name,
                gap=skill.gap,
                priority="High" if high else "Medium",
                timeframe="2-3 months" if high else "1-2 months",
                resources=skill_resources(skill.name),
                milestones=skill_milestones(skill.name, skill.gap),
                order=len(roadmap) + 1,
            )
        )
    return roadmap
