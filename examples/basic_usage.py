"""Basic Tincture usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tincture import Color, convert, css_to_color


def demonstrate_colors() -> None:
    # Components convert lazily: reading hue moves the color to HSL.
    purple = Color.from_hex("#663399")
    print("RGB:", purple.rgb, purple.mode.value)
    print("Hue:", purple.hue, purple.mode.value)
    print("Value:", purple.value, purple.mode.value)

    accent = Color.create({"h": 200, "s": 0.5, "l": 0.5})
    accent.shade(0.2)
    print("Shaded accent:", accent.css("hsl"), accent.hex6)


def demonstrate_conversions() -> None:
    print("RGB -> HSV:", convert([255, 128, 64], "rgb", "hsv"))
    print("CSS parse:", css_to_color("hsla(300, 100%, 50%, 0.5)"))

    berkeley = Color.from_name("BerkeleyBlue")
    for fmt in Color.css_formats:
        print(f"{fmt:>5}:", berkeley.css(fmt))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_conversions()
