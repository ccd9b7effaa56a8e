"""Numeric helpers: Bezier sampling, runway rectangles, sign dimensions."""
