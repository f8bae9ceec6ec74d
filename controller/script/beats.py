from __future__ import annotations

import re
from enum import Enum
from typing import Dict, List

from schemas.script import Beat

_BEAT_SPLIT_RE = re.compile(r"[.?!\n]")

HIDDEN_WORD = "___"
STAGE_FULL_TEXT = 1
STAGE_PARTIAL = 2
STAGE_RECALL = 3
PARTIAL_HIDE_FRACTION = 0.3


def parse_beats(text: str) -> List[Beat]:
    beats: List[Beat] = []
    for chunk in _BEAT_SPLIT_RE.split(text or ""):
        sentence = chunk.strip()
        if sentence:
            beats.append(Beat(index=len(beats), text=sentence))
    return beats


def should_hide_word(index: int, hide_fraction: float) -> bool:
    # Fixed scatter so the same words stay hidden between attempts.
    return (index * 7 + 3) % 10 < hide_fraction * 10.0


def memorization_text(text: str, stage: int) -> str:
    if stage == STAGE_FULL_TEXT:
        return text
    if stage == STAGE_RECALL:
        return ""
    if stage != STAGE_PARTIAL:
        raise ValueError(f"Unknown memorization stage: {stage}")
    words = text.split()
    return " ".join(
        HIDDEN_WORD if should_hide_word(i, PARTIAL_HIDE_FRACTION) else word
        for i, word in enumerate(words)
    )


def beat_prompt(text: str) -> str:
    words = [w for w in text.split(" ") if w][:3]
    return f"[{' '.join(words)}…]"


class SampleScript(str, Enum):
    hamlet = "Hamlet"
    frankenstein = "Frankenstein"
    scent_of_a_woman = "Scent Of A Woman"
    devils_advocate = "The Devil's Advocate"
    othello = "Othello"


SAMPLE_SCRIPTS: Dict[SampleScript, str] = {
    SampleScript.hamlet: """To be, or not to be, that is the question.
Whether 'tis nobler in the mind to suffer the slings and arrows of outrageous fortune.
Or to take arms against a sea of troubles, and by opposing end them.
To die — to sleep, no more.
And by a sleep to say we end the heart-ache and the thousand natural shocks that flesh is heir to.
'Tis a consummation devoutly to be wish'd.
To die, to sleep.
To sleep, perchance to dream — ay, there's the rub.
For in that sleep of death what dreams may come, when we have shuffled off this mortal coil, must give us pause.
There's the respect that makes calamity of so long life.""",
    SampleScript.frankenstein: """I collected the instruments of life around me, that I might infuse a spark of being into the lifeless thing that lay at my feet.
It was already one in the morning; the rain pattered dismally against the panes, and my candle was nearly burnt out.
How can I describe my emotions at this catastrophe, or how delineate the wretch whom with such infinite pains and care I had endeavoured to form?
His limbs were in proportion, and I had selected his features as beautiful.
Beautiful! Great God!
His yellow skin scarcely covered the work of muscles and arteries beneath.""",
    SampleScript.scent_of_a_woman: """I don't know if Charlie's silence here today is right or wrong.
I'm not a judge or jury.
But I can tell you this: he won't sell anybody out to buy his future!!
And that, my friends, is called integrity. That's called courage.
Now that's the stuff leaders should be made of.
I have come to the crossroads in my life.
I always knew what the right path was. Without exception, I knew.
But I never took it.
You know why? It was too damn hard.""",
    SampleScript.devils_advocate: """Let me give you a little inside information about God.
God likes to watch. He's a prankster.
Think about it. He gives man instincts.
He gives you this extraordinary gift, and then what does He do?
I swear, for His own amusement, his own private, cosmic gag reel, He sets the rules in opposition.
It's the goof of all time. You look, but don't touch. Touch, but don't taste. Taste, but don't swallow.
And while you're jumping from one foot to the next, what is He doing?
He's laughing his sick, fucking ass off!
He's a tight-ass! He's a sadist!""",
    SampleScript.othello: """It is the cause, it is the cause, my soul,—
Let me not name it to you, you chaste stars!—
It is the cause. Yet I'll not shed her blood;
Nor scar that whiter skin of hers than snow,
And smooth as monumental alabaster.
Yet she must die, else she'll betray more men.
Put out the light, and then put out the light.""",
}


def sample_script_key(script: SampleScript) -> str:
    return script.name.replace("_", "-")


def find_sample_script(key: str):
    lowered = (key or "").strip().lower()
    for script in SampleScript:
        if lowered in {sample_script_key(script), script.value.lower()}:
            return script
    return None
