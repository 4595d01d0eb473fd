import logging
from pathlib import Path
from string import Template
from typing import Dict, List, Union

from .base import WORD_LENGTH
from .engine import BitField


logger = logging.getLogger(__name__)

# Source emitted for each word count. Tokens: ${TYPE}, ${WORDCOUNT}, ${BITCOUNT}
SOURCE_TEMPLATE = '''\
from bitfields import bitfield_type


${TYPE} = bitfield_type(${WORDCOUNT})

assert ${TYPE}.bit_count == ${BITCOUNT}

__all__ = ["${TYPE}"]
'''

_types: Dict[int, type] = {}


def type_name(word_count: int) -> str:
    return f"BitField{WORD_LENGTH * word_count}"


def bitfield_type(word_count: int) -> type:
    """
    Get the BitField subclass holding ``word_count`` 32-bit words.

    Types are cached, so every call with the same word count returns the
    same class and instances built from separate calls compare equal.
    """
    if not isinstance(word_count, int) or word_count < 1:
        raise ValueError(f"Word count must be a positive integer, got {word_count!r}")

    cls = _types.get(word_count)
    if cls is None:
        name = type_name(word_count)
        cls = type(name, (BitField,), {
            "__slots__": (),
            "__doc__": f"{WORD_LENGTH * word_count}-bit field made of {word_count} words.",
            "word_count": word_count,
            "bit_count": WORD_LENGTH * word_count,
        })
        _types[word_count] = cls
        logger.debug(f"Created {name} ({word_count} words)")
    return cls


def render_source(word_count: int, template: str = SOURCE_TEMPLATE) -> str:
    """Substitute the type name, word count and bit count into a template."""
    if word_count < 1:
        raise ValueError(f"Word count must be a positive integer, got {word_count!r}")
    return Template(template).substitute(
        TYPE=type_name(word_count),
        WORDCOUNT=str(word_count),
        BITCOUNT=str(WORD_LENGTH * word_count),
    )


def generate(
        output_dir: Union[str, Path],
        max_words: int = 8,
        extension: str = ".py",
        template: str = SOURCE_TEMPLATE,
) -> List[Path]:
    """
    Write one source file per word count from 1 to ``max_words``.

    Args:
        output_dir: Directory receiving the files, created if missing.
        max_words: Largest word count to generate.
        extension: Suffix appended to each type name to form the file name.
        template: Source text containing the substitution tokens.

    Returns:
        Paths of the generated files, in word count order.
    """
    output_dir = Path(output_dir)
    generated = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for word_count in range(1, max_words + 1):
            path = output_dir / f"{type_name(word_count)}{extension}"
            path.write_text(render_source(word_count, template), encoding="utf-8")
            generated.append(path)
            logger.info(f"Generated file: {path.name}")
    except OSError as e:
        logger.error(f"Failed to generate bitfield sources in {output_dir}: {e}")
        raise
    return generated
