"""Method-like declaration extraction by pattern matching."""

import logging

from .languages import LanguageSpec, JAVA_SPEC
from .symbols import Method, Annotation
from .text import mask_comments, mask_literals, declaration_start

logger = logging.getLogger(__name__)


def extract_methods(content: str, spec: LanguageSpec = JAVA_SPEC) -> list[Method]:
    """Find method-like declarations in source text.

    Methods are returned in textual order. Constructors and anything else
    with the declaration shape `type name(params) {` are matched the same
    way as ordinary methods; control-flow keywords are skipped.

    Args:
        content: Raw source text of the unit
        spec: Language patterns to use

    Returns:
        List of Method records
    """
    masked = mask_comments(content)
    structural = mask_literals(masked)
    # Doc blocks are blanked by masking; a "/**" that survived is in a literal
    doc_blocks = [
        m for m in spec.doc_comment_pattern.finditer(content)
        if masked[m.start()] != "/"
    ]

    methods = []
    for match in spec.method_pattern.finditer(structural):
        name = match.group(1)
        if name in spec.non_method_names:
            continue

        # `new Runnable() {` opens an anonymous class
        prefix = structural[match.start():match.start(1)].split()
        if prefix and prefix[-1] in spec.non_method_prefixes:
            continue

        # The match may open inside blanked comment space; skip it
        matched = match.group(0)
        decl_start = match.start() + len(matched) - len(matched.lstrip())

        preamble_start = declaration_start(structural, decl_start)
        window_start = max(0, decl_start - spec.lookbehind)

        methods.append(Method(
            name=name,
            signature=_build_signature(masked, match.start(1), match.end()),
            javadoc=_attached_javadoc(doc_blocks, preamble_start, window_start, decl_start),
            annotations=extract_annotations(masked[preamble_start:match.end()], spec),
        ))

    logger.debug("Extracted %d methods", len(methods))
    return methods


def extract_annotations(text: str, spec: LanguageSpec = JAVA_SPEC) -> list[Annotation]:
    """All `@Name(args)?` tokens in `text`, in order of appearance.

    Extents are matched with string contents blanked, so a `)` inside a
    literal argument such as `@Path("/{v: (a|b)}")` does not end it.
    """
    annotations = []
    for m in spec.annotation_pattern.finditer(mask_literals(text)):
        arguments = None
        if m.group(2) is not None:
            arguments = text[m.start(2):m.end(2)]
        annotations.append(Annotation(name=m.group(1), arguments=arguments))
    return annotations


def _build_signature(masked: str, name_start: int, end: int) -> str:
    """One-line signature from the start of the name's line to the body."""
    line_start = masked.rfind("\n", 0, name_start) + 1
    sig_text = " ".join(masked[line_start:end].split())

    # Clean up: remove trailing '{'
    return sig_text.rstrip("{ ")


def _attached_javadoc(doc_blocks, preamble_start: int, window_start: int, decl_start: int) -> str:
    """Interior of the doc comment attached to a declaration.

    The block must sit inside the declaration's own preamble (nothing but
    annotations and modifiers between it and the declaration) and must reach
    into the lookbehind window.
    """
    attached = ""
    for block in doc_blocks:
        if block.start() < preamble_start:
            continue
        if block.end() > decl_start:
            break
        if block.end() > window_start:
            attached = block.group(1).strip()
    return attached
