from typing import List

from fastapi import HTTPException, status

from controller.script.beats import (
    HIDDEN_WORD,
    SAMPLE_SCRIPTS,
    SampleScript,
    beat_prompt,
    find_sample_script,
    memorization_text,
    parse_beats,
    sample_script_key,
)
from schemas.script import MemorizationOut, MemorizationRequest, SampleScriptSummary, ScriptOut


def breakdown_script(text: str) -> ScriptOut:
    return ScriptOut(raw_text=text, beats=parse_beats(text))


def list_sample_scripts() -> List[SampleScriptSummary]:
    return [
        SampleScriptSummary(
            key=sample_script_key(script),
            name=script.value,
            beat_count=len(parse_beats(SAMPLE_SCRIPTS[script])),
        )
        for script in SampleScript
    ]


def retrieve_sample_script(key: str) -> ScriptOut:
    script = find_sample_script(key)
    if script is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample script not found")
    text = SAMPLE_SCRIPTS[script]
    return ScriptOut(name=script.value, raw_text=text, beats=parse_beats(text))


def build_memorization_view(request: MemorizationRequest) -> MemorizationOut:
    display_text = memorization_text(request.text, request.stage)
    return MemorizationOut(
        stage=request.stage,
        display_text=display_text,
        prompt=beat_prompt(request.text),
        hidden_word_count=display_text.split(" ").count(HIDDEN_WORD) if display_text else 0,
    )
