"""
Founder archetype catalog.

Static descriptive metadata and reference centroids for the eight
archetypes. ARCHETYPE_ORDER is the canonical ordering used to break
classification ties.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


PERFECTIONIST_BUILDER = "Perfectionist Builder"
OPPORTUNISTIC_VISIONARY = "Opportunistic Visionary"
ISOLATED_DREAMER = "Isolated Dreamer"
BURNING_OUT = "Burning Out"
SELF_ASSURED_HUSTLER = "Self-Assured Hustler"
COMMUNITY_DRIVEN = "Community-Driven"
BALANCED_FOUNDER = "Balanced Founder"
GROWTH_SEEKER = "Growth Seeker"


@dataclass(frozen=True)
class Archetype:
    """One founder archetype and its descriptive metadata."""
    name: str
    description: str
    traits: Tuple[str, ...]
    strength: str
    challenge: str
    recommendation: str
    # imposterSyndrome, founderDoubt, identityFusion, fearOfRejection,
    # riskTolerance, isolationLevel
    centroid: Tuple[int, int, int, int, int, int] = field(repr=False)
    is_urgent: bool = False
    encouragement: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        """Format for API responses and persistence."""
        return {
            "name": self.name,
            "description": self.description,
            "traits": list(self.traits),
            "strength": self.strength,
            "challenge": self.challenge,
            "recommendation": self.recommendation,
            "isUrgent": self.is_urgent,
            "encouragement": self.encouragement,
        }


ARCHETYPES: Dict[str, Archetype] = {
    PERFECTIONIST_BUILDER: Archetype(
        name=PERFECTIONIST_BUILDER,
        description=(
            "You hold your work to an exacting standard and rarely feel it is ready. "
            "Quality matters to you, but self-doubt can stall shipping."
        ),
        traits=("Detail-oriented", "High standards", "Cautious with risk", "Self-critical"),
        strength="You build things that last and sweat the details others miss.",
        challenge="Waiting for perfect can cost you momentum and feedback.",
        recommendation="Ship a small, imperfect version this week and let users tell you what matters.",
        centroid=(75, 75, 55, 60, 30, 50),
    ),
    OPPORTUNISTIC_VISIONARY: Archetype(
        name=OPPORTUNISTIC_VISIONARY,
        description=(
            "You spot openings quickly and move on them with confidence. "
            "Uncertainty energizes rather than paralyzes you."
        ),
        traits=("Bold", "Fast-moving", "Confident", "Opportunity-driven"),
        strength="You act decisively when others hesitate.",
        challenge="Speed can outrun validation; blind spots go unchecked.",
        recommendation="Pair each big bet with one piece of critical outside feedback before committing.",
        centroid=(25, 25, 45, 35, 85, 40),
    ),
    ISOLATED_DREAMER: Archetype(
        name=ISOLATED_DREAMER,
        description=(
            "You carry a big vision largely on your own. Your startup is close to "
            "your identity and you rarely share the weight of it."
        ),
        traits=("Visionary", "Independent", "Deeply invested", "Under-supported"),
        strength="Your conviction keeps the vision alive when nobody else sees it yet.",
        challenge="Isolation magnifies doubt and makes setbacks feel personal.",
        recommendation="Find one peer founder to talk with every week, even briefly.",
        centroid=(55, 60, 70, 55, 50, 85),
    ),
    BURNING_OUT: Archetype(
        name=BURNING_OUT,
        description=(
            "Several strain indicators are elevated at once. You may be running on "
            "empty while carrying your startup alone."
        ),
        traits=("Exhausted", "Isolated", "Identity under pressure", "Running on reserves"),
        strength="Your commitment is real; you have kept going through a lot.",
        challenge="Continuing at this pace risks your health and your company.",
        recommendation="Talk to someone you trust or a mental health professional this week, and cut one commitment.",
        centroid=(80, 80, 80, 75, 40, 80),
        is_urgent=True,
    ),
    SELF_ASSURED_HUSTLER: Archetype(
        name=SELF_ASSURED_HUSTLER,
        description=(
            "You trust your abilities and are comfortable with risk. "
            "Doubt rarely slows you down."
        ),
        traits=("Self-confident", "Driven", "Risk-tolerant", "Action-oriented"),
        strength="You execute with energy and bounce back from setbacks quickly.",
        challenge="Confidence can crowd out dissenting views you need to hear.",
        recommendation="Ask a trusted advisor to name your biggest blind spot, and listen without rebutting.",
        centroid=(20, 20, 55, 30, 70, 50),
    ),
    COMMUNITY_DRIVEN: Archetype(
        name=COMMUNITY_DRIVEN,
        description=(
            "You build with and through people. A strong network keeps you grounded "
            "and your doubts in check."
        ),
        traits=("Collaborative", "Well-connected", "Grounded", "Consensus-seeking"),
        strength="You draw on a support network that helps you weather hard stretches.",
        challenge="Leaning on consensus can slow decisions that are yours to make.",
        recommendation="Make one decision this week on your own judgment before asking anyone.",
        centroid=(40, 40, 45, 45, 50, 20),
    ),
    BALANCED_FOUNDER: Archetype(
        name=BALANCED_FOUNDER,
        description=(
            "Your scores sit in a healthy middle range. You take the work seriously "
            "without letting it define you."
        ),
        traits=("Steady", "Self-aware", "Measured", "Resilient"),
        strength="Your balance lets you sustain effort over the long run.",
        challenge="Comfort in the middle can make it easy to avoid stretch goals.",
        recommendation="Write down what keeps you balanced so you can return to it under pressure.",
        centroid=(50, 50, 50, 50, 50, 50),
    ),
    GROWTH_SEEKER: Archetype(
        name=GROWTH_SEEKER,
        description=(
            "Your profile is still taking shape. You are learning what kind of "
            "founder you want to be."
        ),
        traits=("Curious", "Open to feedback", "Developing", "Adaptable"),
        strength="You are open to learning and adjusting course.",
        challenge="Without a clear picture of your patterns, stress can creep up unnoticed.",
        recommendation="Set one small growth goal this week and reflect on it on Friday.",
        centroid=(60, 45, 40, 55, 45, 55),
        encouragement=(
            "Every founder starts somewhere. Keep checking in and your patterns "
            "will become clearer."
        ),
    ),
}

ARCHETYPE_ORDER: Tuple[str, ...] = (
    PERFECTIONIST_BUILDER,
    OPPORTUNISTIC_VISIONARY,
    ISOLATED_DREAMER,
    BURNING_OUT,
    SELF_ASSURED_HUSTLER,
    COMMUNITY_DRIVEN,
    BALANCED_FOUNDER,
    GROWTH_SEEKER,
)


def get_archetype(name: str) -> Archetype:
    """
    Look up an archetype by its exact name.

    Raises:
        KeyError: Unknown archetype name
    """
    return ARCHETYPES[name]


def all_archetypes() -> List[Archetype]:
    """Archetypes in canonical order."""
    return [ARCHETYPES[name] for name in ARCHETYPE_ORDER]
