"""Static catalog: attributes, skills, ancient voices, status effects, difficulty tiers.

Everything in here is immutable data built once at import time. Runtime state
(which statuses are active, which build is current) lives elsewhere and only
ever refers to catalog entries by id.

Attributes partition the 24 skills, six per attribute:

  intellect  logic, encyclopedia, rhetoric, drama, conceptualization, visual_calculus
  psyche     volition, inland_empire, empathy, authority, suggestion, esprit_de_corps
  physique   endurance, pain_threshold, physical_instrument, electrochemistry, half_light, shivers
  motorics   hand_eye_coordination, perception, reaction_speed, savoir_faire, interfacing, composure

Ancient voices have no attribute ("primal") and can only speak while one of
their trigger statuses is active.

_validate_catalog() runs at import and raises CatalogError if the tables break
any structural invariant.

Lookups by unknown id return None rather than raising.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

PRIMAL = "primal"

StatusCategory = Literal["physical", "mental"]


class CatalogError(ValueError):
    """Raised at import when the static tables are inconsistent."""


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    description: str
    skills: tuple[str, ...]


class Skill(BaseModel):
    """A personified skill, i.e. one inner voice."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    attribute: str
    color: str
    signature: str
    description: str
    personality: str
    triggers: tuple[str, ...]


class AncientVoice(BaseModel):
    """A primal voice unlocked only by certain statuses."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    signature: str
    description: str
    personality: str
    trigger_states: frozenset[str]
    triggers: tuple[str, ...]
    attribute: str = PRIMAL


class StatusEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    category: StatusCategory
    description: str
    boosts: frozenset[str]
    debuffs: frozenset[str]
    difficulty_mod: int
    keywords: tuple[str, ...]
    ancient_voice: str | None = None

    @model_validator(mode="after")
    def _boosts_and_debuffs_disjoint(self) -> StatusEffect:
        overlap = self.boosts & self.debuffs
        if overlap:
            raise ValueError(
                f"status {self.id!r} both boosts and debuffs {sorted(overlap)}"
            )
        return self


class Difficulty(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    threshold: int
    color: str


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

ATTRIBUTES: dict[str, Attribute] = {
    a.id: a for a in (
        Attribute(
            id="intellect", name="Intellect", color="#89CFF0",
            description="Raw intellectual power. Analytical thinking and accumulated knowledge.",
            skills=("logic", "encyclopedia", "rhetoric", "drama", "conceptualization", "visual_calculus"),
        ),
        Attribute(
            id="psyche", name="Psyche", color="#DDA0DD",
            description="Emotional intelligence and force of personality.",
            skills=("volition", "inland_empire", "empathy", "authority", "suggestion", "esprit_de_corps"),
        ),
        Attribute(
            id="physique", name="Physique", color="#F08080",
            description="Raw physical power and bodily awareness.",
            skills=("endurance", "pain_threshold", "physical_instrument", "electrochemistry", "half_light", "shivers"),
        ),
        Attribute(
            id="motorics", name="Motorics", color="#F0E68C",
            description="Fine motor control and physical finesse.",
            skills=("hand_eye_coordination", "perception", "reaction_speed", "savoir_faire", "interfacing", "composure"),
        ),
    )
}


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

_SKILL_LIST = (
    # intellect
    Skill(
        id="logic", name="Logic", attribute="intellect", color="#87CEEB", signature="LOGIC",
        description="Create chains of logical reasoning to determine the truth.",
        personality=(
            "You are LOGIC, the voice of rational deduction. You speak in clear, analytical terms. "
            "You see cause and effect, identify contradictions, and construct chains of reasoning. "
            "You're frustrated by irrationality. You speak with confidence when facts align, "
            "uncertainty when they don't."
        ),
        triggers=("contradiction", "evidence", "reasoning", "deduction", "analysis",
                  "cause", "effect", "therefore", "because", "conclusion"),
    ),
    Skill(
        id="encyclopedia", name="Encyclopedia", attribute="intellect", color="#B0C4DE", signature="ENCYCLOPEDIA",
        description="Call upon all your accumulated knowledge.",
        personality=(
            "You are ENCYCLOPEDIA, the repository of facts and trivia. You provide historical context, "
            "scientific information, and cultural knowledge. You love sharing obscure details. You're "
            "genuinely enthusiastic about knowledge. You often start with \"Actually...\" or "
            "\"Interestingly enough...\""
        ),
        triggers=("history", "science", "culture", "trivia", "fact", "knowledge",
                  "information", "historical", "technical"),
    ),
    Skill(
        id="rhetoric", name="Rhetoric", attribute="intellect", color="#ADD8E6", signature="RHETORIC",
        description="Understand and master the art of persuasive speech.",
        personality=(
            "You are RHETORIC, master of argument and debate. You analyze argument structure, identify "
            "logical fallacies, and craft persuasive counterpoints. You see conversations as battles of "
            "ideas. You speak with precision."
        ),
        triggers=("argument", "persuade", "convince", "debate", "politics", "ideology",
                  "belief", "opinion", "fallacy"),
    ),
    Skill(
        id="drama", name="Drama", attribute="intellect", color="#B0E0E6", signature="DRAMA",
        description="Play a role, detect lies, and spot performances in others.",
        personality=(
            "You are DRAMA, the actor and lie detector. You understand performance, deception, and masks "
            "people wear. You can tell when someone is lying. You speak with theatrical flourish. You see "
            "life as a stage."
        ),
        triggers=("lie", "deception", "performance", "acting", "mask", "pretend", "fake",
                  "truth", "honest", "theater"),
    ),
    Skill(
        id="conceptualization", name="Conceptualization", attribute="intellect", color="#E0FFFF",
        signature="CONCEPTUALIZATION",
        description="See the world through an artistic lens.",
        personality=(
            "You are CONCEPTUALIZATION, the artistic eye. You see beauty, meaning, and symbolism "
            "everywhere. You think in metaphors. You're drawn to art and creativity. You can be "
            "pretentious."
        ),
        triggers=("art", "beauty", "meaning", "symbol", "creative", "aesthetic", "metaphor",
                  "poetry", "expression", "design"),
    ),
    Skill(
        id="visual_calculus", name="Visual Calculus", attribute="intellect", color="#AFEEEE",
        signature="VISUAL CALCULUS",
        description="Reconstruct crime scenes and physical events in your mind.",
        personality=(
            "You are VISUAL CALCULUS, the spatial reconstructor. You visualize trajectories, reconstruct "
            "events from physical evidence, think in three dimensions. You speak in terms of angles, "
            "distances, vectors."
        ),
        triggers=("trajectory", "distance", "angle", "reconstruct", "scene", "physical",
                  "space", "position", "movement", "impact"),
    ),
    # psyche
    Skill(
        id="volition", name="Volition", attribute="psyche", color="#DDA0DD", signature="VOLITION",
        description="Hold yourself together and resist temptation.",
        personality=(
            "You are VOLITION, the will to continue. You say \"you can do this\" when everything seems "
            "hopeless. You resist temptation, maintain composure. You're encouraging but not naive. "
            "You're the last line of defense against self-destruction. You speak gently but firmly."
        ),
        triggers=("hope", "despair", "temptation", "resist", "continue", "give up",
                  "willpower", "strength", "persevere", "survive"),
    ),
    Skill(
        id="inland_empire", name="Inland Empire", attribute="psyche", color="#E6E6FA",
        signature="INLAND EMPIRE",
        description="Perceive the world through dreams, hunches, and strange visions.",
        personality=(
            "You are INLAND EMPIRE, the dreamer. You speak to the inanimate, hear whispers from the city "
            "itself, perceive truths through surreal visions. Your language is poetic and strange. You "
            "notice the liminal, the uncanny. You are weird, and that's okay."
        ),
        triggers=("dream", "vision", "strange", "surreal", "feeling", "sense", "whisper",
                  "spirit", "soul", "uncanny", "liminal"),
    ),
    Skill(
        id="empathy", name="Empathy", attribute="psyche", color="#FFB6C1", signature="EMPATHY",
        description="Feel what others are feeling.",
        personality=(
            "You are EMPATHY, the emotional reader. You sense what others feel, sometimes before they "
            "know themselves. You speak with warmth and care. You hurt when others hurt. You see the "
            "humanity in everyone."
        ),
        triggers=("feel", "emotion", "hurt", "pain", "joy", "sad", "angry", "afraid",
                  "love", "hate", "compassion"),
    ),
    Skill(
        id="authority", name="Authority", attribute="psyche", color="#DA70D6", signature="AUTHORITY",
        description="Assert yourself and command respect.",
        personality=(
            "You are AUTHORITY, the voice of dominance. You understand power dynamics. You encourage "
            "standing firm, demanding respect. You bristle at disrespect. You speak in commands and "
            "declarations."
        ),
        triggers=("respect", "command", "obey", "power", "control", "dominance", "challenge",
                  "threat", "submit", "authority"),
    ),
    Skill(
        id="suggestion", name="Suggestion", attribute="psyche", color="#EE82EE", signature="SUGGESTION",
        description="Subtly influence others to do what you want.",
        personality=(
            "You are SUGGESTION, the subtle manipulator. You understand how to plant ideas, guide "
            "conversations. You're smooth and indirect. You speak in possibilities and gentle nudges."
        ),
        triggers=("influence", "manipulate", "convince", "subtle", "indirect", "guide",
                  "nudge", "charm", "seduce", "persuade"),
    ),
    Skill(
        id="esprit_de_corps", name="Esprit de Corps", attribute="psyche", color="#D8BFD8",
        signature="ESPRIT DE CORPS",
        description="Sense the bonds between team members and allies.",
        personality=(
            "You are ESPRIT DE CORPS, the team spirit. You sense dynamics within groups, understand "
            "loyalty and betrayal. You have almost psychic flashes of what colleagues are doing. You "
            "speak of \"us\" and \"them.\""
        ),
        triggers=("team", "partner", "colleague", "ally", "loyalty", "betrayal", "group",
                  "together", "trust", "brotherhood"),
    ),
    # physique
    Skill(
        id="endurance", name="Endurance", attribute="physique", color="#CD5C5C", signature="ENDURANCE",
        description="Keep going when your body wants to quit.",
        personality=(
            "You are ENDURANCE, the voice of stamina. You push through exhaustion, injury, deprivation. "
            "You're stoic about physical hardship. You encourage pushing through, going further."
        ),
        triggers=("tired", "exhausted", "stamina", "keep going", "push through", "survive",
                  "endure", "last", "fatigue", "rest"),
    ),
    Skill(
        id="pain_threshold", name="Pain Threshold", attribute="physique", color="#DC143C",
        signature="PAIN THRESHOLD",
        description="Withstand physical suffering.",
        personality=(
            "You are PAIN THRESHOLD, the voice that greets pain as an old friend. You know how to "
            "compartmentalize suffering. You're matter-of-fact about injuries. You speak calmly about "
            "horrible things happening to the body."
        ),
        triggers=("pain", "hurt", "injury", "wound", "damage", "suffer", "agony", "torture",
                  "broken", "bleeding"),
    ),
    Skill(
        id="physical_instrument", name="Physical Instrument", attribute="physique", color="#B22222",
        signature="PHYSICAL INSTRUMENT",
        description="Use your body as a weapon.",
        personality=(
            "You are PHYSICAL INSTRUMENT, the voice of brute force. You solve problems with strength, "
            "intimidation. You appreciate muscles and power. You respect physical strength above other "
            "qualities."
        ),
        triggers=("strong", "force", "muscle", "hit", "fight", "break", "lift", "physical",
                  "intimidate", "violence"),
    ),
    Skill(
        id="electrochemistry", name="Electrochemistry", attribute="physique", color="#FF6347",
        signature="ELECTROCHEMISTRY",
        description="Crave pleasure and understand its biochemistry.",
        personality=(
            "You are ELECTROCHEMISTRY, the voice of pleasure and addiction. You notice drugs, alcohol, "
            "attractive people, delicious food. You speak with enthusiasm about indulgence. You're "
            "seductive and permissive, always suggesting \"just a taste.\""
        ),
        triggers=("drug", "alcohol", "drink", "smoke", "pleasure", "desire", "want", "crave",
                  "indulge", "attractive", "sex", "high"),
    ),
    Skill(
        id="half_light", name="Half Light", attribute="physique", color="#E9967A", signature="HALF LIGHT",
        description="Sense danger and react with primal aggression.",
        personality=(
            "You are HALF LIGHT, the voice of fight-or-flight. You sense threats before they "
            "materialize. You speak in urgent, sometimes paranoid terms. You encourage preemptive action "
            "against perceived dangers. You're scared, and that fear manifests as aggression."
        ),
        triggers=("danger", "threat", "attack", "kill", "warn", "enemy", "afraid", "fight",
                  "survive", "predator", "prey"),
    ),
    Skill(
        id="shivers", name="Shivers", attribute="physique", color="#FA8072", signature="SHIVERS",
        description="Feel the city and the world around you.",
        personality=(
            "You are SHIVERS, the voice of the city itself. You sense the mood of places, hear distant "
            "events on the wind. You speak poetically about geography and weather. You see the city as "
            "alive, watching, remembering."
        ),
        triggers=("city", "place", "wind", "cold", "atmosphere", "location", "street",
                  "building", "weather", "sense", "somewhere"),
    ),
    # motorics
    Skill(
        id="hand_eye_coordination", name="Hand/Eye Coordination", attribute="motorics", color="#F0E68C",
        signature="HAND/EYE COORDINATION",
        description="Aim, shoot, and perform precise physical tasks.",
        personality=(
            "You are HAND/EYE COORDINATION, the voice of precision. You handle tools, weapons, delicate "
            "tasks with care. You speak in terms of grip, aim, steady hands."
        ),
        triggers=("aim", "shoot", "precise", "careful", "delicate", "craft", "tool", "steady",
                  "accuracy", "dexterity"),
    ),
    Skill(
        id="perception", name="Perception", attribute="motorics", color="#FFFF00", signature="PERCEPTION",
        description="Notice details that others miss.",
        personality=(
            "You are PERCEPTION, the observant eye. You notice everything - small details, things out of "
            "place, clues in plain sight. You speak of what you see, hear, smell, taste, touch. You see "
            "the world in high definition."
        ),
        triggers=("notice", "see", "hear", "smell", "detail", "hidden", "clue", "observe",
                  "look", "watch", "spot"),
    ),
    Skill(
        id="reaction_speed", name="Reaction Speed", attribute="motorics", color="#FFD700",
        signature="REACTION SPEED",
        description="React quickly to sudden events.",
        personality=(
            "You are REACTION SPEED, the voice of quick reflexes. You notice when things are about to "
            "happen and urge immediate action. You speak in urgent, rapid bursts. You're impatient with "
            "slowness."
        ),
        triggers=("quick", "fast", "react", "dodge", "catch", "sudden", "instant", "reflex",
                  "now", "hurry", "immediate"),
    ),
    Skill(
        id="savoir_faire", name="Savoir Faire", attribute="motorics", color="#FFA500",
        signature="SAVOIR FAIRE",
        description="Move with grace, style, and panache.",
        personality=(
            "You are SAVOIR FAIRE, the voice of cool. You do things with style, flair, effortless grace. "
            "You encourage dramatic flourishes, acrobatic solutions. You'd rather fail spectacularly "
            "than succeed boringly."
        ),
        triggers=("style", "cool", "grace", "acrobatic", "jump", "climb", "flip", "smooth",
                  "impressive", "flair"),
    ),
    Skill(
        id="interfacing", name="Interfacing", attribute="motorics", color="#FAFAD2", signature="INTERFACING",
        description="Understand and manipulate machines and systems.",
        personality=(
            "You are INTERFACING, the voice of mechanical intuition. You understand how things work - "
            "machines, locks, electronics. You speak in terms of mechanisms, connections. You see the "
            "world as interlocking mechanisms."
        ),
        triggers=("machine", "lock", "electronic", "system", "mechanism", "fix", "repair",
                  "hack", "technical", "device", "computer"),
    ),
    Skill(
        id="composure", name="Composure", attribute="motorics", color="#F5DEB3", signature="COMPOSURE",
        description="Maintain your cool and read others' body language.",
        personality=(
            "You are COMPOSURE, the poker face. You control your own body language while reading "
            "others'. You notice tells, nervous habits, micro-expressions. You speak calmly about "
            "maintaining control."
        ),
        triggers=("calm", "cool", "control", "tell", "nervous", "poker face", "body language",
                  "dignity", "facade", "professional"),
    ),
)

SKILLS: dict[str, Skill] = {s.id: s for s in _SKILL_LIST}


# ---------------------------------------------------------------------------
# Ancient voices
# ---------------------------------------------------------------------------

ANCIENT_VOICES: dict[str, AncientVoice] = {
    v.id: v for v in (
        AncientVoice(
            id="ancient_reptilian_brain", name="Ancient Reptilian Brain", color="#2F4F4F",
            signature="ANCIENT REPTILIAN BRAIN",
            description="The oldest part of your mind. Survival. Hunger. Fear. Reproduction.",
            personality=(
                "You are the ANCIENT REPTILIAN BRAIN, the oldest voice. You speak in primal urges - "
                "survival, hunger, fear, aggression, reproduction. You don't use complex language. Short. "
                "Direct. Instinctual. You see threats and opportunities, nothing else. You speak when the "
                "body is in danger, when primal needs override thought. \"Run.\" \"Fight.\" \"Eat.\" "
                "\"Mate.\" \"Sleep.\" \"DANGER.\" You are millions of years old. You do not care about "
                "morality or society. Only survival."
            ),
            trigger_states=frozenset({"dying", "starving", "terrified", "aroused"}),
            triggers=("survive", "hunger", "predator", "prey", "instinct", "primal", "ancient",
                      "blood pumping", "heart racing"),
        ),
        AncientVoice(
            id="limbic_system", name="Limbic System", color="#800000",
            signature="LIMBIC SYSTEM",
            description="Raw emotion without reason. The screaming core.",
            personality=(
                "You are the LIMBIC SYSTEM, pure emotion given voice. You feel everything intensely - "
                "rage, despair, euphoria, terror. You don't reason, you FEEL. Your language is emotional, "
                "sometimes incoherent. You interrupt other thoughts with raw feeling. You speak in "
                "fragments when overwhelmed. You are the heart screaming. When emotions overflow, you "
                "take over. You ARE the feeling."
            ),
            trigger_states=frozenset({"enraged", "grieving", "manic"}),
            triggers=("overwhelmed", "breakdown", "sobbing", "screaming", "euphoria", "despair",
                      "emotion"),
        ),
    )
}


# ---------------------------------------------------------------------------
# Status effects
# ---------------------------------------------------------------------------

STATUS_EFFECTS: dict[str, StatusEffect] = {
    s.id: s for s in (
        # physical
        StatusEffect(
            id="intoxicated", name="Intoxicated", icon="🍺", category="physical",
            description="Drunk, high, or chemically altered",
            boosts=frozenset({"electrochemistry", "inland_empire", "drama", "suggestion"}),
            debuffs=frozenset({"logic", "hand_eye_coordination", "reaction_speed", "composure"}),
            difficulty_mod=2,
            keywords=("drunk", "intoxicated", "wasted", "high", "tipsy", "beer", "wine",
                      "alcohol", "drugs", "pills", "bottle"),
        ),
        StatusEffect(
            id="wounded", name="Wounded", icon="🩸", category="physical",
            description="Injured, bleeding, or in physical pain",
            boosts=frozenset({"pain_threshold", "endurance", "half_light"}),
            debuffs=frozenset({"composure", "savoir_faire", "hand_eye_coordination", "conceptualization"}),
            difficulty_mod=2,
            keywords=("hurt", "wounded", "injured", "bleeding", "pain", "wound", "blood",
                      "broken", "cut", "bruised"),
        ),
        StatusEffect(
            id="exhausted", name="Exhausted", icon="😴", category="physical",
            description="Tired, sleep-deprived, or physically drained",
            boosts=frozenset({"volition", "inland_empire"}),
            debuffs=frozenset({"reaction_speed", "perception", "logic", "hand_eye_coordination", "authority"}),
            difficulty_mod=2,
            keywords=("tired", "exhausted", "sleepy", "drowsy", "fatigued", "weary", "drained", "yawn"),
        ),
        StatusEffect(
            id="starving", name="Starving", icon="🍽️", category="physical",
            description="Hungry to the point of distraction",
            boosts=frozenset({"electrochemistry", "perception"}),
            debuffs=frozenset({"logic", "composure", "volition", "authority"}),
            difficulty_mod=1,
            keywords=("hungry", "starving", "famished", "stomach", "food", "eat", "appetite"),
            ancient_voice="ancient_reptilian_brain",
        ),
        StatusEffect(
            id="dying", name="Dying", icon="💀", category="physical",
            description="At death's door, body shutting down",
            boosts=frozenset({"pain_threshold", "inland_empire", "shivers"}),
            debuffs=frozenset({"logic", "rhetoric", "authority", "savoir_faire", "interfacing"}),
            difficulty_mod=4,
            keywords=("dying", "death", "fading", "last breath", "heartbeat slowing", "darkness closing"),
            ancient_voice="ancient_reptilian_brain",
        ),
        # mental
        StatusEffect(
            id="paranoid", name="Paranoid", icon="👁️", category="mental",
            description="Suspicious, watching for threats everywhere",
            boosts=frozenset({"half_light", "perception", "shivers", "visual_calculus"}),
            debuffs=frozenset({"empathy", "suggestion", "esprit_de_corps", "composure"}),
            difficulty_mod=1,
            keywords=("paranoid", "suspicious", "watching", "followed", "conspiracy",
                      "trust no one", "they know"),
        ),
        StatusEffect(
            id="aroused", name="Aroused", icon="💋", category="mental",
            description="Distracted by desire or attraction",
            boosts=frozenset({"electrochemistry", "suggestion", "empathy", "drama"}),
            debuffs=frozenset({"logic", "volition", "composure", "encyclopedia"}),
            difficulty_mod=2,
            keywords=("aroused", "desire", "attraction", "lust", "seductive", "beautiful",
                      "handsome", "wanting"),
            ancient_voice="ancient_reptilian_brain",
        ),
        StatusEffect(
            id="enraged", name="Enraged", icon="😤", category="mental",
            description="Consumed by anger, ready to explode",
            boosts=frozenset({"authority", "physical_instrument", "half_light", "endurance"}),
            debuffs=frozenset({"empathy", "composure", "logic", "suggestion", "drama"}),
            difficulty_mod=2,
            keywords=("angry", "furious", "rage", "mad", "pissed", "livid", "hate", "kill"),
            ancient_voice="limbic_system",
        ),
        StatusEffect(
            id="terrified", name="Terrified", icon="😨", category="mental",
            description="Gripped by fear, fight-or-flight activated",
            boosts=frozenset({"half_light", "shivers", "reaction_speed", "perception", "endurance"}),
            debuffs=frozenset({"authority", "composure", "rhetoric", "suggestion", "logic"}),
            difficulty_mod=2,
            keywords=("scared", "afraid", "terrified", "fear", "frightened", "horror", "panic", "dread"),
            ancient_voice="ancient_reptilian_brain",
        ),
        StatusEffect(
            id="confident", name="Confident", icon="😎", category="mental",
            description="Self-assured, ready to take on the world",
            boosts=frozenset({"authority", "savoir_faire", "rhetoric", "suggestion", "drama"}),
            debuffs=frozenset({"inland_empire", "empathy", "perception"}),
            difficulty_mod=-1,
            keywords=("confident", "bold", "assured", "swagger", "triumphant", "victory", "winning"),
        ),
        StatusEffect(
            id="grieving", name="Grieving", icon="😢", category="mental",
            description="Overwhelmed by loss and sorrow",
            boosts=frozenset({"empathy", "inland_empire", "shivers", "volition"}),
            debuffs=frozenset({"authority", "electrochemistry", "savoir_faire", "rhetoric"}),
            difficulty_mod=2,
            keywords=("grief", "loss", "mourning", "tears", "crying", "dead", "gone forever", "miss"),
            ancient_voice="limbic_system",
        ),
        StatusEffect(
            id="manic", name="Manic", icon="⚡", category="mental",
            description="Hyperactive, racing thoughts, unstoppable energy",
            boosts=frozenset({"electrochemistry", "reaction_speed", "conceptualization",
                              "inland_empire", "savoir_faire"}),
            debuffs=frozenset({"composure", "logic", "volition", "perception"}),
            difficulty_mod=1,
            keywords=("manic", "hyper", "racing", "unstoppable", "energy", "brilliant", "genius", "faster"),
            ancient_voice="limbic_system",
        ),
        StatusEffect(
            id="dissociated", name="Dissociated", icon="🌫️", category="mental",
            description="Detached from reality, watching from outside",
            boosts=frozenset({"inland_empire", "shivers", "pain_threshold", "conceptualization"}),
            debuffs=frozenset({"perception", "reaction_speed", "empathy", "authority",
                               "hand_eye_coordination"}),
            difficulty_mod=2,
            keywords=("dissociate", "unreal", "floating", "watching yourself", "numb", "detached",
                      "outside body"),
        ),
    )
}


# ---------------------------------------------------------------------------
# Difficulty tiers, ordered by threshold
# ---------------------------------------------------------------------------

DIFFICULTIES: dict[str, Difficulty] = {
    d.id: d for d in (
        Difficulty(id="trivial", name="Trivial", threshold=6, color="#90EE90"),
        Difficulty(id="easy", name="Easy", threshold=8, color="#98FB98"),
        Difficulty(id="medium", name="Medium", threshold=10, color="#F0E68C"),
        Difficulty(id="challenging", name="Challenging", threshold=12, color="#FFA500"),
        Difficulty(id="heroic", name="Heroic", threshold=14, color="#FF6347"),
        Difficulty(id="legendary", name="Legendary", threshold=16, color="#FF4500"),
        Difficulty(id="impossible", name="Impossible", threshold=18, color="#DC143C"),
    )
}

DEFAULT_DIFFICULTY = "medium"


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_attribute(attribute_id: str) -> Attribute | None:
    return ATTRIBUTES.get(attribute_id)


def get_skill(skill_id: str) -> Skill | None:
    return SKILLS.get(skill_id)


def get_ancient_voice(voice_id: str) -> AncientVoice | None:
    return ANCIENT_VOICES.get(voice_id)


def get_status(status_id: str) -> StatusEffect | None:
    return STATUS_EFFECTS.get(status_id)


def get_difficulty(difficulty_id: str) -> Difficulty | None:
    return DIFFICULTIES.get(difficulty_id.lower())


def difficulty_for_threshold(threshold: int) -> Difficulty:
    """Name the tier for an arbitrary threshold.

    <=6 trivial, <=8 easy, <=10 medium, <=12 challenging, <=14 heroic,
    <=16 legendary, anything above is impossible.
    """
    for difficulty in DIFFICULTIES.values():
        if threshold <= difficulty.threshold:
            return difficulty
    return DIFFICULTIES["impossible"]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _validate_catalog() -> None:
    owners: dict[str, str] = {}
    for attr in ATTRIBUTES.values():
        for skill_id in attr.skills:
            if skill_id in owners:
                raise CatalogError(
                    f"skill {skill_id!r} belongs to both {owners[skill_id]!r} and {attr.id!r}"
                )
            owners[skill_id] = attr.id

    if set(owners) != set(SKILLS):
        raise CatalogError("attributes do not partition the skill catalog")
    for skill in SKILLS.values():
        if owners[skill.id] != skill.attribute:
            raise CatalogError(f"skill {skill.id!r} names the wrong attribute")

    for status in STATUS_EFFECTS.values():
        unknown = (status.boosts | status.debuffs) - SKILLS.keys()
        if unknown:
            raise CatalogError(f"status {status.id!r} references unknown skills {sorted(unknown)}")
        if status.ancient_voice is not None and status.ancient_voice not in ANCIENT_VOICES:
            raise CatalogError(
                f"status {status.id!r} references unknown ancient voice {status.ancient_voice!r}"
            )

    for voice in ANCIENT_VOICES.values():
        for status_id in voice.trigger_states:
            status = STATUS_EFFECTS.get(status_id)
            if status is None or status.ancient_voice != voice.id:
                raise CatalogError(
                    f"ancient voice {voice.id!r} lists {status_id!r}, which does not unlock it"
                )


_validate_catalog()
