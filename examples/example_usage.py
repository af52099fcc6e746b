#!/usr/bin/env python3
"""Example usage of Authoring Aid."""

from rich.console import Console

from authoring_aid.config import get_config, configure_logging
from authoring_aid.engine import AuthoringAssistant, FixDirection, InvalidColorFormat
from authoring_aid.report import render_report


console = Console()


def example_contrast_check(assistant: AuthoringAssistant):
    """Example of rating color pairs."""
    print("🎨 Example: Contrast Check")
    print("-" * 50)

    pairs = [
        ("#111827", "#f8f9fa"),
        ("#5b2be6", "#f8f9fa"),
        ("#ff00a8", "#0f1724"),
        ("#aaaaaa", "#ffffff"),
    ]

    for fg, bg in pairs:
        result = assistant.check_contrast(fg, bg)
        render_report(console, contrast=result)

        if result.needs_fix:
            for direction in FixDirection:
                fixed = assistant.suggest_fix(fg, bg, direction)
                if fixed:
                    print(f"   Make {direction.value}: {fixed}")
                else:
                    print(f"   No {direction.value} color reaches the target")


def example_invalid_color(assistant: AuthoringAssistant):
    """Example of a malformed color being rejected."""
    print("\n🚫 Example: Invalid Color")
    print("-" * 50)

    try:
        assistant.check_contrast("#12345", "#ffffff")
    except InvalidColorFormat as e:
        print(f"❌ {e}")


def example_text_analysis(assistant: AuthoringAssistant):
    """Example of analyzing text as it is typed."""
    print("\n📝 Example: Text Analysis")
    print("-" * 50)

    drafts = [
        "",
        "hello world",
        "The quick brown fox jumps over the lazy dog. It was not amused!",
        "Send the report to team@example.com by friday",
    ]

    for draft in drafts:
        print(f"\nText: {draft!r}")
        render_report(console, text_result=assistant.analyze_text(draft))


def main():
    """Run all examples."""
    print("✍️  Authoring Aid Examples")
    print("=" * 50)

    config = get_config()
    configure_logging(config.logging)
    assistant = AuthoringAssistant(config)

    example_contrast_check(assistant)
    example_invalid_color(assistant)
    example_text_analysis(assistant)

    print("\n🎉 All examples completed!")


if __name__ == "__main__":
    main()
