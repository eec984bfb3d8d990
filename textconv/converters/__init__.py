"""
Converters sub-package for textconv.

Contains the per-kind conversion rules that ``textconv.engine.to()``
dispatches to.  Each rule is a plain function of the source value (plus the
target type where one function serves several targets).

Layout:
  - strings.py: Whitespace trimming, hex-prefix detection, str <-> bytes transcoding.
  - numbers.py: int / float / numpy fixed-width / bool targets.
  - rendering.py: str / bytes targets, including pair, list and dict formatting.
  - containers.py: Element-wise conversion between tuples, lists and dicts.

The engine owns the target-type registry; these modules never import it,
so containers.py receives the element converter as an argument.
"""
