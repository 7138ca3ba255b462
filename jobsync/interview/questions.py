from __future__ import annotations

QUESTION_BANK: dict[str, tuple[str, ...]] = {
    "behavioral": (
        "Tell me about a time when you had to work under pressure. How did you handle it?",
        "Describe a situation where you had to work with a difficult team member. What did you do?",
        "Give me an example of a goal you reached and tell me how you achieved it.",
        "Tell me about a time you failed. How did you deal with the situation?",
        "Describe a time when you had to learn something quickly. How did you approach it?",
    ),
    "technical": (
        "Explain the difference between var, let, and const in JavaScript.",
        "How would you optimize a slow-running database query?",
        "Describe the concept of object-oriented programming and its main principles.",
        "What is the difference between synchronous and asynchronous programming?",
        "How would you approach debugging a complex software issue?",
    ),
    "situational": (
        "You're assigned a project with a tight deadline but unclear requirements. How do you proceed?",
        "Your manager asks you to work on a project that conflicts with your values. What do you do?",
        "You notice a security vulnerability in your company's system. How do you handle it?",
        "A client is unhappy with the delivered product. How would you address this situation?",
        "You're leading a project and a team member consistently misses deadlines. What's your approach?",
    ),
}

# Questions drawn from each bank, in bank order, for a mixed interview.
MIXED_DRAW: tuple[tuple[str, int], ...] = (
    ("behavioral", 2),
    ("technical", 2),
    ("situational", 1),
)

INTERVIEW_TITLES: dict[str, str] = {
    "behavioral": "Behavioral Interview",
    "technical": "Technical Interview",
    "situational": "Situational Interview",
    "mixed": "Complete Interview Practice",
}


def mixed_question_pool() -> list[str]:
    pool: list[str] = []
    for bank, count in MIXED_DRAW:
        pool.extend(QUESTION_BANK[bank][:count])
    return pool
