"""
Example 1: Text to carousel slides

Shows the editor flow: normalize the text, ask for the recommended slide
count, split, then pair the fragments with whatever images the user picked.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from slidesplit.policy.loader import load_policy
from slidesplit.runtime.planner import SlidePlanner
from slidesplit.runtime.slides import pair_with_images
from slidesplit.segmenters.normalize import normalize

# Simple console logger
class ConsoleLogger:
    def info(self, msg: str, **kv): print(f"INFO: {msg} {kv}")
    def warn(self, msg: str, **kv): print(f"WARN: {msg} {kv}")
    def error(self, msg: str, **kv): print(f"ERROR: {msg} {kv}")

SAMPLES = {
    "story": (
        "I moved to the city with one suitcase and a plan. The plan lasted a week. "
        "After that it was mostly coffee and long walks. I learned the bus routes by heart. "
        "I learned which bakeries sold yesterday's bread for half price. "
        "Slowly the city stopped feeling like a maze. One morning I gave a stranger directions. "
        "That was the day it became home."
    ),
    "list": (
        "- Drink water before coffee\n"
        "- Write down three priorities\n"
        "- Block an hour for deep work\n"
        "- Take a walk after lunch\n"
        "- Close the laptop at six"
    ),
    "quote": '"Success is not final, failure is not fatal."',
}

def main():
    print("🖼️  slidesplit Carousel Example")
    print("=" * 40)

    policy_path = Path(__file__).parent.parent / "policies" / "compact.yaml"
    policy = load_policy(policy_path)
    planner = SlidePlanner(policy=policy, logger=ConsoleLogger())

    # The user picked two images before the text was final.
    images = ["file:///photos/sunrise.jpg", "file:///photos/desk.jpg"]

    for name, raw_text in SAMPLES.items():
        print(f"\n📝 Sample: {name}")
        text = normalize(raw_text)
        target = planner.optimal_slide_count(text)
        plan = planner.plan(text, target)

        print(f"🎯 {plan.slide_count} slides (target {target}, balance {plan.length_summary['balance']:.2f})")
        for slide in pair_with_images(plan.fragments, images):
            image = slide.image or "<pick an image>"
            print(f"   [{slide.index + 1}] {slide.text!r} -> {image}")

if __name__ == "__main__":
    main()
