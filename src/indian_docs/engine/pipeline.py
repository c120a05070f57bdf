"""
Runs the detector over text/files, merges spans, delegates rewriting to ActionEngine.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import shutil
from typing import Iterable, List

from ..config import IndianDocsConfig
from ..detect.regex_backend import RegexBackend, Span
from .actions import ActionEngine

logger = logging.getLogger(__name__)


@dataclass
class FileFinding:
    path: str
    spans: List[Span]


@dataclass
class ScanResult:
    files: int
    entities: int
    findings: List[FileFinding]


class Pipeline:
    """
    Detect identifiers with the regex backend and apply policy actions for masking.
    """

    def __init__(self, cfg: IndianDocsConfig) -> None:
        self.cfg = cfg
        self._actions = ActionEngine(policy=cfg.policy)
        self.regex = RegexBackend(types=cfg.detectors.enabled_types())

    # ---------------- Public API ----------------

    def scan_text(self, text: str) -> List[Span]:
        """Detect identifiers in one string, apply the confidence floor, merge overlaps."""
        floor = self.cfg.policy.min_confidence
        spans = [s for s in self.regex.detect(text) if s.confidence >= floor]
        return self._merge(spans)

    def mask_text(self, text: str) -> str:
        return self._actions.apply(text, self.scan_text(text))

    def scan_path(self, src: Path) -> ScanResult:
        """Scan a file or an entire directory tree."""
        findings: List[FileFinding] = []
        files = 0
        entities = 0
        for p in self._iter_files(src):
            files += 1
            text = self._read(p)
            if text is None:
                continue
            spans = self.scan_text(text)
            entities += len(spans)
            if spans:
                findings.append(FileFinding(str(p), spans))
        return ScanResult(files=files, entities=entities, findings=findings)

    def mask_path(self, src: Path, out: Path) -> None:
        """
        Write a masked mirror of the source tree to `out/`.

        Files that are not UTF-8 text are copied byte-for-byte.
        """
        out.mkdir(parents=True, exist_ok=True)
        for p in self._iter_files(src):
            dest = out / p.name if src.is_file() else out / p.relative_to(src)
            dest.parent.mkdir(parents=True, exist_ok=True)
            text = self._read(p)
            if text is None:
                self._copy_unchanged(p, dest)
                continue
            dest.write_text(self.mask_text(text), encoding="utf-8")

    # --------------- Internals ------------------

    @staticmethod
    def _iter_files(src: Path) -> Iterable[Path]:
        if src.is_file():
            yield src
            return
        for p in sorted(src.rglob("*")):
            if p.is_file():
                yield p

    @staticmethod
    def _read(p: Path) -> str | None:
        try:
            return p.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.info("skipping non-UTF-8 file %s", p)
            return None
        except OSError as e:
            logger.warning("skipping unreadable file %s: %s", p, e)
            return None

    @staticmethod
    def _copy_unchanged(p: Path, dest: Path) -> None:
        try:
            shutil.copyfile(p, dest)
        except OSError as e:
            logger.warning("could not copy %s: %s", p, e)

    @staticmethod
    def _merge(spans: List[Span]) -> List[Span]:
        """
        Resolve overlapping spans.

        On overlap keep the higher (confidence, length); the earlier span wins ties.
        """
        if not spans:
            return []

        spans = sorted(spans, key=lambda s: (s.start, -s.end))
        kept: List[Span] = []

        def overlaps(a: Span, b: Span) -> bool:
            return not (a.end <= b.start or b.end <= a.start)

        for s in spans:
            drop_s = False
            to_remove: List[Span] = []
            for k in kept:
                if not overlaps(s, k):
                    continue
                s_key = (s.confidence, s.end - s.start)
                k_key = (k.confidence, k.end - k.start)
                if s_key > k_key:
                    to_remove.append(k)
                else:
                    drop_s = True
                    break

            if not drop_s:
                if to_remove:
                    kept = [x for x in kept if x not in to_remove]
                kept.append(s)

        return sorted(kept, key=lambda s: s.start)
