from typing import Annotated

from fastapi import APIRouter, Depends

from abitype.api.deps import get_grammar
from abitype.api.schemas.validation import ClassifyRequest, ClassifyResponse
from abitype.grammar.classifier import AbiGrammar

router = APIRouter(prefix="/api/types", tags=["types"])

GrammarDep = Annotated[AbiGrammar, Depends(get_grammar)]


@router.post("/classify", response_model=ClassifyResponse)
def classify_types(body: ClassifyRequest, grammar: GrammarDep) -> ClassifyResponse:
    """Classify each type string; unrecognized ones are returned with a reason, not rejected."""
    return ClassifyResponse(results=[grammar.classify(t) for t in body.types])


@router.get("/fixed-array-lengths")
def fixed_array_lengths(grammar: GrammarDep) -> dict:
    arrays = grammar.arrays
    return {
        "min": arrays.min_length,
        "max": arrays.max_length,
        "max_depth": arrays.max_depth,
    }
