"""Three-tier summarization: javadoc > AI (Haiku) > signature fallback."""

import logging
import os
from dataclasses import dataclass

from anthropic import Anthropic

from ..parser.symbols import Method

logger = logging.getLogger(__name__)


def extract_summary_from_docstring(docstring: str) -> str:
    """Extract first sentence from javadoc text (Tier 1).

    Takes the first prose line (leading `*` removed, tag lines ignored)
    and truncates at first period. Costs zero tokens.
    """
    if not docstring:
        return ""

    first_line = ""
    for line in docstring.strip().split("\n"):
        line = line.strip().lstrip("*").strip()
        if not line:
            continue
        if line.startswith("@"):
            break
        first_line = line
        break

    # Truncate at first period if present
    if "." in first_line:
        first_line = first_line[:first_line.index(".") + 1]

    return first_line[:120]


def signature_fallback(method: Method) -> str:
    """Generate summary from signature when all else fails (Tier 3).

    Always produces something, even without API keys.
    """
    if method.signature:
        return method.signature[:120]
    return f"method {method.name}"


@dataclass
class BatchSummarizer:
    """AI-based batch summarization using Claude Haiku (Tier 2)."""

    model: str = "claude-haiku-4-5-20251001"
    max_tokens_per_batch: int = 500

    def __post_init__(self):
        self.client = None
        api_key = os.environ.get("ANTHROPIC_API_KEY")
        if api_key:
            self.client = Anthropic(api_key=api_key)

    def summarize_batch(self, methods: list[Method], batch_size: int = 10) -> list[Method]:
        """Summarize methods without javadoc using AI.

        Only processes methods that don't already have summaries.
        Returns updated methods.
        """
        if not self.client:
            for method in methods:
                if not method.summary:
                    method.summary = signature_fallback(method)
            return methods

        to_summarize = [m for m in methods if not m.summary and not m.javadoc]

        if not to_summarize:
            return methods

        for i in range(0, len(to_summarize), batch_size):
            batch = to_summarize[i:i + batch_size]
            self._summarize_one_batch(batch)

        return methods

    def _summarize_one_batch(self, batch: list[Method]):
        """Summarize one batch of methods."""
        prompt = self._build_prompt(batch)

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens_per_batch,
                temperature=0.0,
                messages=[{"role": "user", "content": prompt}]
            )

            summaries = self._parse_response(response.content[0].text, len(batch))

            for method, summary in zip(batch, summaries):
                method.summary = summary or signature_fallback(method)

        except Exception as e:
            # On any API error, fall back to signature
            logger.warning("AI summarization failed, using signatures: %s", e)
            for method in batch:
                if not method.summary:
                    method.summary = signature_fallback(method)

    def _build_prompt(self, methods: list[Method]) -> str:
        """Build summarization prompt for a batch."""
        lines = [
            "Summarize each Java method in ONE short sentence (max 15 words).",
            "Focus on what it does, not how.",
            "",
            "Input:",
        ]

        for i, method in enumerate(methods, 1):
            annotations = " ".join(a.text for a in method.annotations)
            prefix = f"{annotations} " if annotations else ""
            lines.append(f"{i}. {prefix}{method.signature}")

        lines.extend([
            "",
            "Output format: NUMBER. SUMMARY",
            "Example: 1. Looks up a user by id and returns it as JSON.",
            "",
            "Summaries:",
        ])

        return "\n".join(lines)

    def _parse_response(self, text: str, expected_count: int) -> list[str]:
        """Parse numbered summaries from response."""
        summaries = [""] * expected_count

        for line in text.split("\n"):
            line = line.strip()
            if not line:
                continue

            # Look for "N. summary" format
            if "." in line:
                parts = line.split(".", 1)
                try:
                    num = int(parts[0].strip())
                except ValueError:
                    continue
                if 1 <= num <= expected_count:
                    summaries[num - 1] = parts[1].strip()

        return summaries


def summarize_methods_simple(methods: list[Method]) -> list[Method]:
    """Tier 1 + Tier 3: Javadoc extraction + signature fallback.

    No AI required. Fast and deterministic.
    """
    for method in methods:
        if method.summary:
            continue

        if method.javadoc:
            method.summary = extract_summary_from_docstring(method.javadoc)

        if not method.summary:
            method.summary = signature_fallback(method)

    return methods


def summarize_methods(methods: list[Method], use_ai: bool = True) -> list[Method]:
    """Full three-tier summarization.

    Tier 1: Javadoc extraction (free)
    Tier 2: AI batch summarization (Haiku)
    Tier 3: Signature fallback (always works)
    """
    if not use_ai:
        return summarize_methods_simple(methods)

    for method in methods:
        if method.javadoc and not method.summary:
            method.summary = extract_summary_from_docstring(method.javadoc)

    summarizer = BatchSummarizer()
    methods = summarizer.summarize_batch(methods)

    for method in methods:
        if not method.summary:
            method.summary = signature_fallback(method)

    return methods
