"""
CLI to score interview answers -> JSON.
"""
from __future__ import annotations
import argparse, json, os
from focus.config import Settings
from focus.scoring import evaluate_interview


def load_answers(path: str) -> list[str]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Answers file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    # either a bare list or {"answers": [...]}
    if isinstance(data, dict):
        data = data.get("answers", [])
    return [str(a) for a in data]


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--answers", required=True, help="JSON file with a list of answer transcripts")
    p.add_argument("--warnings", type=int, default=0, help="Gaze warnings recorded during the interview")
    p.add_argument("--questions", type=int, default=None, help="Number of questions asked (default: number of answers)")
    p.add_argument("--out", default="output/evaluation.json", help="Path to output JSON")
    args = p.parse_args(argv)

    settings = Settings()
    answers = load_answers(args.answers)
    total = args.questions if args.questions is not None else len(answers)
    result = evaluate_interview(answers, args.warnings, total, settings.scoring_weights()).model_dump()
    print(json.dumps(result, indent=2, ensure_ascii=False))

    # Also write to file
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
    print(f"Evaluation written to {args.out}")
    return result

if __name__ == "__main__":
    main()
