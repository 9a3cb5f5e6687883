"""
jsonmender demonstration script.
"""

import jsonmender
from jsonmender import RepairConfig


def main():
    print("jsonmender - Generated JSON Repair Demo")
    print("=" * 40)

    examples = [
        # Markdown fence around the payload
        ('```json\n[\n  {"ID": 1}\n]\n```', "Markdown fence"),
        # Array closed too early
        ('[\n  {"ID": 1}\n]\n\n  {"ID": 2}\n]', "Stray closing bracket"),
        # Records without separating commas
        ('[\n  {"ID": 1}\n  {"ID": 2}\n]', "Missing comma"),
        # HTML attribute quotes
        (
            '[\n  {"ID": 1, "Content": "<a href="https://example.com">x</a>"}\n]',
            "Unescaped HTML attribute",
        ),
        # Text field broken over lines
        (
            """[
  {
    "ID": 1,
    "Content": "<p>First half
      second half</p>
    "IMG": "a.png"
  }
]""",
            "Broken multi-line field",
        ),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:\n{text}")

        result = jsonmender.repair(text)
        print(f"Output:\n{result.text}")
        for fix in result.fixes:
            print(f"  fixed: {fix}")
        for error in result.errors:
            print(f"  error: {error}")

    # Steps that guess at content can be switched off
    print(f"\n{len(examples) + 1}. Conservative mode")
    text = '[\n  {"ID": 1, "Content": "<p>Say "hi</p>"}\n]'
    print(f"Input:\n{text}")
    result = jsonmender.repair(text, config=RepairConfig.conservative())
    print(result.report().render())


if __name__ == "__main__":
    main()
