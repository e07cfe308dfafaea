"""
Daily micro-action templates.

Grouped by the dimension they target, by archetype, and a general
wellness pool used to fill out a plan.
"""

from dataclasses import dataclass
from typing import Dict, List, Literal, Tuple

from pulse.assessment import archetypes


ActionCategory = Literal["mindfulness", "social", "physical", "professional", "rest"]


@dataclass(frozen=True)
class ActionTemplate:
    text: str
    category: ActionCategory
    target_dimension: str


def _actions(dimension: str, *rows: Tuple[str, ActionCategory]) -> List[ActionTemplate]:
    return [ActionTemplate(text, category, dimension) for text, category in rows]


DIMENSION_ACTIONS: Dict[str, List[ActionTemplate]] = {
    "imposterSyndrome": _actions(
        "imposterSyndrome",
        ("Write down 3 accomplishments from this week", "mindfulness"),
        ("Share a recent win with a trusted friend or mentor", "social"),
        ("Review positive feedback you've received recently", "mindfulness"),
        ("Document one skill you've improved this month", "professional"),
        ("Remind yourself: everyone starts somewhere", "mindfulness"),
    ),
    "founderDoubt": _actions(
        "founderDoubt",
        ("Revisit your original vision and why you started", "mindfulness"),
        ("Talk to a customer about the value you provide", "social"),
        ("List 3 problems your product solves", "professional"),
        ("Read a founder success story for inspiration", "rest"),
        ("Celebrate one small milestone today", "mindfulness"),
    ),
    "identityFusion": _actions(
        "identityFusion",
        ("Spend 30 minutes on a hobby unrelated to work", "rest"),
        ("Have a conversation without mentioning your startup", "social"),
        ("Write about who you are outside of being a founder", "mindfulness"),
        ("Reconnect with an old friend from before your startup", "social"),
        ("Take a walk without checking your phone", "physical"),
    ),
    "fearOfRejection": _actions(
        "fearOfRejection",
        ("Reach out to one potential customer or partner", "professional"),
        ("Ask for feedback on something small", "social"),
        ("Reframe a past rejection as a learning opportunity", "mindfulness"),
        ("Practice a pitch with a supportive friend", "social"),
        ("Remember: rejection is redirection, not failure", "mindfulness"),
    ),
    "isolationLevel": _actions(
        "isolationLevel",
        ("Message a fellow founder to check in", "social"),
        ("Join an online founder community discussion", "social"),
        ("Schedule a virtual coffee with someone in your network", "social"),
        ("Attend a local meetup or networking event", "social"),
        ("Share a challenge you're facing with your support network", "social"),
    ),
    "stress": _actions(
        "stress",
        ("Take 5 deep breaths right now", "mindfulness"),
        ("Go for a 15-minute walk outside", "physical"),
        ("Do a 10-minute guided meditation", "mindfulness"),
        ("Write down what's stressing you and one action to address it", "mindfulness"),
        ("Take a proper lunch break away from your desk", "rest"),
    ),
    "energy": _actions(
        "energy",
        ("Take a 20-minute power nap", "rest"),
        ("Do 10 minutes of stretching or light exercise", "physical"),
        ("Drink a full glass of water right now", "physical"),
        ("Step outside for fresh air and sunlight", "physical"),
        ("Set a firm end time for work today", "rest"),
    ),
    "mood": _actions(
        "mood",
        ("Listen to a song that makes you happy", "rest"),
        ("Write down 3 things you're grateful for", "mindfulness"),
        ("Call or text someone who makes you smile", "social"),
        ("Watch a short funny video for a quick laugh", "rest"),
        ("Do something kind for someone else today", "social"),
    ),
}

ARCHETYPE_ACTIONS: Dict[str, List[ActionTemplate]] = {
    archetypes.PERFECTIONIST_BUILDER: [
        ActionTemplate("Ship something imperfect today - done is better than perfect", "professional", "imposterSyndrome"),
        ActionTemplate("Set a time limit on a task and stop when it's up", "professional", "stress"),
        ActionTemplate("Ask for feedback before you think it's ready", "social", "fearOfRejection"),
    ],
    archetypes.OPPORTUNISTIC_VISIONARY: [
        ActionTemplate("Seek out one piece of critical feedback today", "social", "founderDoubt"),
        ActionTemplate("Consult with an advisor before making a big decision", "professional", "founderDoubt"),
        ActionTemplate("Write down potential risks of your current plan", "mindfulness", "founderDoubt"),
    ],
    archetypes.ISOLATED_DREAMER: [
        ActionTemplate("Reach out to one person in your network today", "social", "isolationLevel"),
        ActionTemplate("Share your current challenge with someone who can help", "social", "isolationLevel"),
        ActionTemplate("Join a founder community or forum discussion", "social", "isolationLevel"),
    ],
    archetypes.BURNING_OUT: [
        ActionTemplate("Take a real break - no screens for 30 minutes", "rest", "stress"),
        ActionTemplate("Reach out to a mental health professional or trusted mentor", "social", "stress"),
        ActionTemplate("Delegate or postpone one task today", "professional", "energy"),
    ],
    archetypes.SELF_ASSURED_HUSTLER: [
        ActionTemplate("Ask someone for honest feedback on a blind spot", "social", "founderDoubt"),
        ActionTemplate("Listen more than you speak in your next conversation", "social", "fearOfRejection"),
        ActionTemplate("Consider an alternative perspective on a decision", "mindfulness", "founderDoubt"),
    ],
    archetypes.COMMUNITY_DRIVEN: [
        ActionTemplate("Make a decision today without consulting others", "professional", "founderDoubt"),
        ActionTemplate("Trust your gut on something small", "mindfulness", "imposterSyndrome"),
        ActionTemplate("Spend time working alone without interruptions", "professional", "identityFusion"),
    ],
    archetypes.BALANCED_FOUNDER: [
        ActionTemplate("Document what's keeping you balanced right now", "mindfulness", "mood"),
        ActionTemplate("Share your balance strategies with another founder", "social", "isolationLevel"),
        ActionTemplate("Plan something fun for the weekend", "rest", "energy"),
    ],
    archetypes.GROWTH_SEEKER: [
        ActionTemplate("Learn something new related to your business today", "professional", "founderDoubt"),
        ActionTemplate("Reflect on a recent challenge and what you learned", "mindfulness", "imposterSyndrome"),
        ActionTemplate("Set one small growth goal for this week", "professional", "mood"),
    ],
}

GENERAL_WELLNESS_ACTIONS: List[ActionTemplate] = [
    ActionTemplate("Take a 5-minute mindfulness break", "mindfulness", "stress"),
    ActionTemplate("Drink water and have a healthy snack", "physical", "energy"),
    ActionTemplate("Step away from screens for 10 minutes", "rest", "energy"),
    ActionTemplate("Write down your top 3 priorities for tomorrow", "professional", "stress"),
    ActionTemplate("End work at a reasonable hour today", "rest", "energy"),
    ActionTemplate("Express gratitude to someone who helped you", "social", "mood"),
    ActionTemplate("Review your wins from this week", "mindfulness", "imposterSyndrome"),
    ActionTemplate("Do something that brings you joy", "rest", "mood"),
]
