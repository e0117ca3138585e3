"""
Corruption runner: corrupts one HTML document or a whole corpus and writes
the plain and marked versions plus a JSONL record per document.

Usage
-----
# Built-in sample documents with the default intensities
python runner.py

# A single file, reproducible, with a review header on the marked version
python runner.py --input essay.html --seed 7 \
                 --spelling 10 --punctuation 5 --missing-text 8 \
                 --candidate "Jane Doe" --assignment "Essay 1"

# A directory of .html files with a custom misspelling table
python runner.py --html-dir essays/ --lexicon-json lexicon.json --output-dir out/

Output files (in --output-dir)
  <Candidate>_<Assignment>_plain.html    corrupted document to hand out
  <Candidate>_<Assignment>_marked.html   same, errors highlighted for review
  results.jsonl                          one record per document
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from typing import List, Optional, Set

# ---------------------------------------------------------------------------
# Local imports
# ---------------------------------------------------------------------------
from config import (
    DEFAULT_SPELLING,
    DEFAULT_PUNCTUATION,
    DEFAULT_MISSING_TEXT,
    DEFAULT_SEED,
    SENTENCE_REMOVAL_THRESHOLD,
    OUTPUT_DIR,
    RESULTS_FILENAME,
)
from corpus.loader import CorpusLoader, DocumentEntry, load_document
from corruption import CorruptionResult, CorruptionSettings, TextCorruptor
from corruption.lexicon import load_misspellings
from corruption.markup import build_report_header, output_basename


# ---------------------------------------------------------------------------
# Result serialisation helpers
# ---------------------------------------------------------------------------

def _result_to_dict(
    doc: DocumentEntry,
    settings: CorruptionSettings,
    seed: Optional[int],
    result: CorruptionResult,
    plain_path: str,
    marked_path: str,
) -> dict:
    return {
        "document_id": doc.id,
        "candidate_name": doc.candidate_name,
        "assignment_name": doc.assignment_name,
        "settings": settings.to_dict(),
        "seed": seed,
        "errorCounts": result.error_counts.to_dict(),
        "plain_path": plain_path,
        "marked_path": marked_path,
    }


def _document_basename(doc: DocumentEntry, used: Set[str]) -> str:
    if doc.candidate_name or doc.assignment_name:
        base = output_basename(doc.candidate_name, doc.assignment_name)
    else:
        base = doc.id
    # Keep file names unique within one run
    name = base
    suffix = 1
    while name in used:
        suffix += 1
        name = f"{base}_{suffix}"
    used.add(name)
    return name


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(content)


# ---------------------------------------------------------------------------
# Core run
# ---------------------------------------------------------------------------

def run_corruption(
    documents: List[DocumentEntry],
    settings: CorruptionSettings,
    output_dir: str,
    seed: Optional[int] = None,
    corruptor: Optional[TextCorruptor] = None,
) -> List[dict]:
    """
    Corrupt every document and write its outputs.

    Parameters
    ----------
    documents  : list of DocumentEntry objects
    settings   : corruption intensities applied to every document
    output_dir : directory for the HTML files and the JSONL record file
    seed       : base seed; document i uses seed + i so runs are reproducible
    corruptor  : engine to use (default: built-in lexicon tables)

    Returns
    -------
    list of the record dicts written to the JSONL file
    """
    os.makedirs(output_dir, exist_ok=True)
    if corruptor is None:
        corruptor = TextCorruptor(sentence_threshold=SENTENCE_REMOVAL_THRESHOLD)

    print(
        f"\n{'='*60}\n"
        f"Corruption run\n"
        f"  Documents    : {len(documents)}\n"
        f"  Spelling     : {settings.spelling}%\n"
        f"  Punctuation  : {settings.punctuation}%\n"
        f"  Missing text : {settings.missing_text}%\n"
        f"  Seed         : {seed if seed is not None else 'random'}\n"
        f"  Output dir   : {output_dir}\n"
        f"{'='*60}\n"
    )

    records: List[dict] = []
    used_names: Set[str] = set()
    results_path = os.path.join(output_dir, RESULTS_FILENAME)

    with open(results_path, "a", encoding="utf-8") as out_fh:
        for idx, doc in enumerate(documents):
            _print_progress(idx + 1, len(documents))

            doc_seed = seed + idx if seed is not None else None
            result = corruptor.corrupt(doc.html, settings, seed=doc_seed)

            base = _document_basename(doc, used_names)
            plain_path = os.path.join(output_dir, f"{base}_plain.html")
            marked_path = os.path.join(output_dir, f"{base}_marked.html")

            header = build_report_header(
                result.error_counts,
                candidate_name=doc.candidate_name,
                assignment_name=doc.assignment_name,
            )
            _write_text(plain_path, result.plain_version)
            _write_text(marked_path, header + result.marked_version)

            record = _result_to_dict(doc, settings, doc_seed, result, plain_path, marked_path)
            out_fh.write(json.dumps(record) + "\n")
            records.append(record)

    print(f"\n  Results written to: {results_path}")
    _print_summary(records)
    return records


# ---------------------------------------------------------------------------
# Progress display
# ---------------------------------------------------------------------------

def _print_progress(current: int, total: int) -> None:
    pct = 100 * current / total if total else 0
    bar_len = 30
    filled = int(bar_len * current / total) if total else 0
    bar = "█" * filled + "░" * (bar_len - filled)
    print(f"\r    [{bar}] {current}/{total} ({pct:.1f}%)", end="", flush=True)


def _print_summary(records: List[dict]) -> None:
    print(f"\n  {'Document':<28} {'Spelling':>9} {'Punct.':>7} {'Missing':>8}")
    for r in records:
        c = r["errorCounts"]
        print(
            f"  {r['document_id']:<28} {c['spelling']:>9} "
            f"{c['punctuation']:>7} {c['missingText']:>8}"
        )


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inject spelling, punctuation and missing-text errors into HTML documents."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input", type=str, default=None,
        help="Path to a single HTML document"
    )
    source.add_argument(
        "--corpus-json", type=str, default=None,
        help="Path to a JSON corpus file (default: built-in sample documents)"
    )
    source.add_argument(
        "--html-dir", type=str, default=None,
        help="Directory of .html files to corrupt"
    )
    parser.add_argument(
        "--spelling", type=float, default=DEFAULT_SPELLING,
        help="Spelling error intensity in percent (0-100)"
    )
    parser.add_argument(
        "--punctuation", type=float, default=DEFAULT_PUNCTUATION,
        help="Punctuation error intensity in percent (0-100)"
    )
    parser.add_argument(
        "--missing-text", type=float, default=DEFAULT_MISSING_TEXT,
        help="Missing text intensity in percent (0-100); above 50 whole sentences may go"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help="Seed for reproducible corruption (default: random)"
    )
    parser.add_argument(
        "--candidate", type=str, default="",
        help="Candidate name for the review header (with --input)"
    )
    parser.add_argument(
        "--assignment", type=str, default="",
        help="Assignment name for the review header (with --input)"
    )
    parser.add_argument(
        "--lexicon-json", type=str, default=None,
        help="JSON object of word → list of misspellings replacing the built-in table"
    )
    parser.add_argument(
        "--max-docs", type=int, default=None,
        help="Cap the number of documents"
    )
    parser.add_argument(
        "--output-dir", type=str, default=OUTPUT_DIR,
        help="Directory to write HTML outputs and the JSONL record file"
    )
    return parser.parse_args(argv)


def _load_documents(args: argparse.Namespace) -> List[DocumentEntry]:
    if args.input:
        doc = load_document(args.input)
        doc.candidate_name = args.candidate
        doc.assignment_name = args.assignment
        return [doc] if doc.has_content else []
    loader = CorpusLoader(
        json_path=args.corpus_json,
        html_dir=args.html_dir,
        max_docs=args.max_docs,
    )
    return loader.load()


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    settings = CorruptionSettings(
        spelling=args.spelling,
        punctuation=args.punctuation,
        missing_text=args.missing_text,
    )
    if settings.out_of_range:
        print("  [WARN] Intensities outside 0-100 are treated as never/always firing.")

    misspellings = load_misspellings(args.lexicon_json) if args.lexicon_json else None
    corruptor = TextCorruptor(
        misspellings=misspellings,
        sentence_threshold=SENTENCE_REMOVAL_THRESHOLD,
    )

    documents = _load_documents(args)
    if not documents:
        print("ERROR: No content to corrupt. Check your document source.", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(documents)} documents.")

    t0 = time.perf_counter()
    run_corruption(
        documents=documents,
        settings=settings,
        output_dir=args.output_dir,
        seed=args.seed,
        corruptor=corruptor,
    )
    elapsed = time.perf_counter() - t0
    print(f"\nCorruption complete in {elapsed:.1f}s.")


if __name__ == "__main__":
    main()
