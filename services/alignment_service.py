import logging

from fastapi import HTTPException, status

from controller.alignment.text_align import align_words, summarize_alignment, tokenize
from core.settings import MAX_ALIGNMENT_TOKENS
from schemas.alignment import AlignmentReport, AlignmentRequest

logger = logging.getLogger(__name__)


def build_alignment_report(request: AlignmentRequest, max_tokens: int = MAX_ALIGNMENT_TOKENS) -> AlignmentReport:
    expected_tokens = tokenize(request.expected_text)
    actual_tokens = tokenize(request.actual_text)
    if len(expected_tokens) > max_tokens or len(actual_tokens) > max_tokens:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Texts are limited to {max_tokens} words each for alignment.",
        )

    results = align_words(expected_tokens, actual_tokens)
    summary = summarize_alignment(results)
    logger.info(
        "Aligned %s expected / %s spoken words: accuracy=%.2f edits=%s",
        len(expected_tokens),
        len(actual_tokens),
        summary.accuracy,
        summary.edit_distance,
    )
    return AlignmentReport(
        expected_text=request.expected_text,
        actual_text=request.actual_text,
        results=results,
        summary=summary,
    )
