from properties.generators import (
    GeneratorConfig,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EDGE_CASES,
    generate_text_pairs,
)


__all__ = [
    "GeneratorConfig",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EDGE_CASES",
    "generate_text_pairs",
]
