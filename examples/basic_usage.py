"""Basic usage examples for ReviewSense."""

from reviewsense import SentimentClassifier, SessionContext, WorkflowController
from reviewsense.core.interpretation import interpret
from reviewsense.services.dataset import load_reviews
from reviewsense.workflow.view import ViewState


def example_single_review():
    """Example: classify one hand-written review."""
    print("🔍 Classifying a single review")

    classifier = SentimentClassifier()
    classifier.initialize()

    for text in ["Great product!", "Terrible, broke in a day"]:
        interpretation = interpret(classifier.classify(text))
        print(f"  {text!r}: {interpretation.label} ({interpretation.confidence_percent})")


def example_workflow():
    """Example: the same flow the UI drives, without telemetry."""
    print("\n🔍 Running the analysis workflow")

    dataset = load_reviews("reviews_test.tsv")
    print(f"📊 Loaded {len(dataset)} reviews")

    controller = WorkflowController(SessionContext.from_settings(), ViewState())
    controller.bootstrap()
    print(f"🎯 {controller.view.status_message}")

    for _ in range(3):
        interpretation = controller.on_analyze_requested()
        if interpretation is None:
            print(f"  ❌ {controller.view.error_message}")
            continue
        print(f"  {controller.view.review_text[:60]!r} -> {interpretation.label}")


if __name__ == "__main__":
    print("🚀 ReviewSense Examples")
    print("=" * 50)

    try:
        example_single_review()
        example_workflow()
        print("\n✅ All examples completed successfully!")
    except Exception as e:
        print(f"\n❌ Error: {e}")
        import traceback
        traceback.print_exc()
