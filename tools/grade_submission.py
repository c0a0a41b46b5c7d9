# tools/grade_submission.py
from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path
from typing import List, Optional
from exam_core.catalog import CatalogError, load_catalog
from exam_core.config import default_eval_config, load_config
from exam_core.evaluation import evaluate
from exam_core.export import to_csv, to_json
from exam_core.grading import missing_required

log = logging.getLogger("grade_submission")

def _load_answers(path: str) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("answers"), dict):
        data = data["answers"]
    if not isinstance(data, dict):
        raise ValueError("answers file must hold a JSON object keyed by question id")
    return data

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Score one submission against a question catalog.")
    ap.add_argument("--catalog", required=True)
    ap.add_argument("--answers", required=True)
    ap.add_argument("--config", default="config.json")
    ap.add_argument("--no-partial", action="store_true", help="MULTI_SELECT all-or-nothing")
    ap.add_argument("--penalty", type=float, default=None, help="wrong-pick penalty per option (fraction)")
    ap.add_argument("--format", choices=["json","csv"], default="json")
    ap.add_argument("--out", default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    a = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if a.verbose else logging.INFO, format="[%(levelname)s] %(message)s")

    try:
        questions = load_catalog(a.catalog)
        answers = _load_answers(a.answers)
    except (CatalogError, OSError, ValueError) as e:
        log.error("%s", e); return 1

    cfg = load_config(a.config)
    if a.no_partial: cfg["allowPartialCredit"] = False
    if a.penalty is not None: cfg["wrongPickPenaltyPerOption"] = a.penalty

    missing = missing_required(questions, answers)
    if missing:
        log.warning("Unanswered required questions: %s", ", ".join(missing))

    res = evaluate(questions, answers, default_eval_config(cfg))
    log.info("Scored %d questions: %.2f/%.2f, %d need review",
             len(res.by_question), res.total_score, res.total_max, res.needs_review_count)

    body = to_csv(res) if a.format == "csv" else json.dumps(to_json(res), ensure_ascii=False, indent=2) + "\n"
    if a.out:
        Path(a.out).write_text(body, encoding="utf-8")
        log.info("Result written to %s", a.out)
    else:
        sys.stdout.write(body)
    return 0

if __name__ == "__main__": raise SystemExit(main())
