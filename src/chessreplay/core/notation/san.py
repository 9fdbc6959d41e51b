"""SAN (Standard Algebraic Notation) token decoding.

Decoding is purely textual: a token is resolved against a board later by
:mod:`chessreplay.game.resolver`. The grammar is chosen by token length once
check markers and annotation glyphs are stripped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from chessreplay.core.enums import CastleKind, Color, PieceKind
from chessreplay.core.errors import UnparseableMovetextError
from chessreplay.core.notation.models import ParsedMove
from chessreplay.core.types import FILE_TO_COL, RANK_TO_ROW

_SAN_PIECE: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceKind] = {v: k for k, v in _SAN_PIECE.items()}
_PROMOTION_KINDS = frozenset(
    {PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT}
)

_CASTLES: dict[str, CastleKind] = {
    "O-O": CastleKind.KINGSIDE,
    "0-0": CastleKind.KINGSIDE,
    "O-O-O": CastleKind.QUEENSIDE,
    "0-0-0": CastleKind.QUEENSIDE,
}
_CAPTURE_MARKS = "x:"
_CHECK_MARKS = "+#"
_ANNOTATION_GLYPHS = "!?"

_Fields = dict[str, Any]


def piece_letter(kind: PieceKind) -> str:
    """SAN letter of *kind*; pawns have none."""
    return _SAN_PIECE.get(kind, "")


def _file(ch: str) -> int | None:
    return FILE_TO_COL.get(ch)


def _rank(ch: str) -> int | None:
    return RANK_TO_ROW.get(ch)


def _piece(ch: str) -> PieceKind | None:
    return _SAN_PIECE_REV.get(ch)


def _destination(file_ch: str, rank_ch: str) -> _Fields | None:
    file_idx = _file(file_ch)
    rank_idx = _rank(rank_ch)
    if file_idx is None or rank_idx is None:
        return None
    return {"destination_file": file_idx, "destination_rank": rank_idx}


def _pawn_capture(s: str) -> _Fields | None:
    """``<file>x<file><rank>``."""
    from_file = _file(s[0])
    dest = _destination(s[2], s[3])
    if from_file is None or s[1] not in _CAPTURE_MARKS or dest is None:
        return None
    return {
        "piece_kind": PieceKind.PAWN,
        "departure_file": from_file,
        "is_capture": True,
        **dest,
    }


def _promotion(ch: str) -> PieceKind | None:
    kind = _piece(ch)
    return kind if kind in _PROMOTION_KINDS else None


# -- Length-specific grammars -----------------------------------------------


def _decode_2(s: str) -> _Fields | None:
    from_file = _file(s[0])
    if from_file is None:
        return None

    # e4: plain advance.
    dest_rank = _rank(s[1])
    if dest_rank is not None:
        return {
            "piece_kind": PieceKind.PAWN,
            "destination_file": from_file,
            "destination_rank": dest_rank,
        }

    # ed: compact capture, no rank given.
    dest_file = _file(s[1])
    if dest_file is not None:
        return {
            "piece_kind": PieceKind.PAWN,
            "departure_file": from_file,
            "destination_file": dest_file,
            "is_capture": True,
        }
    return None


def _decode_3(s: str) -> _Fields | None:
    # Nf3
    kind = _piece(s[0])
    if kind is not None:
        dest = _destination(s[1], s[2])
        if dest is None:
            return None
        return {"piece_kind": kind, **dest}

    # exd / e:d
    from_file = _file(s[0])
    dest_file = _file(s[2])
    if from_file is None or dest_file is None or s[1] not in _CAPTURE_MARKS:
        return None
    return {
        "piece_kind": PieceKind.PAWN,
        "departure_file": from_file,
        "destination_file": dest_file,
        "is_capture": True,
    }


def _decode_4(s: str) -> _Fields | None:
    # c8=Q
    if s[2] == "=":
        dest = _destination(s[0], s[1])
        promotion = _promotion(s[3])
        if dest is None or promotion is None:
            return None
        return {"piece_kind": PieceKind.PAWN, "promotion": promotion, **dest}

    kind = _piece(s[0])
    if kind is None:
        # exd5
        return _pawn_capture(s)

    dest = _destination(s[2], s[3])
    if dest is None:
        return None
    fields: _Fields = {"piece_kind": kind, **dest}

    # Nxf3 / Nbd7 / R1e2
    if s[1] in _CAPTURE_MARKS:
        fields["is_capture"] = True
    elif _file(s[1]) is not None:
        fields["departure_file"] = _file(s[1])
    elif _rank(s[1]) is not None:
        fields["departure_rank"] = _rank(s[1])
    else:
        return None
    return fields


def _decode_5(s: str) -> _Fields | None:
    kind = _piece(s[0])
    dest = _destination(s[3], s[4])
    if kind is None or dest is None:
        return None
    fields: _Fields = {"piece_kind": kind, **dest}

    # Nbxd7 / R1xe2; file wins over rank.
    if s[2] in _CAPTURE_MARKS:
        fields["is_capture"] = True
        if _file(s[1]) is not None:
            fields["departure_file"] = _file(s[1])
        elif _rank(s[1]) is not None:
            fields["departure_rank"] = _rank(s[1])
        else:
            return None
        return fields

    # Qh4e1
    from_file = _file(s[1])
    from_rank = _rank(s[2])
    if from_file is None or from_rank is None:
        return None
    fields["departure_file"] = from_file
    fields["departure_rank"] = from_rank
    return fields


def _decode_6(s: str) -> _Fields | None:
    # exd8=Q
    if s[4] == "=":
        fields = _pawn_capture(s[:4])
        promotion = _promotion(s[5])
        if fields is None or promotion is None:
            return None
        fields["promotion"] = promotion
        return fields

    # Qh4xe1
    kind = _piece(s[0])
    from_file = _file(s[1])
    from_rank = _rank(s[2])
    dest = _destination(s[4], s[5])
    if (
        kind is None
        or from_file is None
        or from_rank is None
        or s[3] not in _CAPTURE_MARKS
        or dest is None
    ):
        return None
    return {
        "piece_kind": kind,
        "departure_file": from_file,
        "departure_rank": from_rank,
        "is_capture": True,
        **dest,
    }


_DECODERS: dict[int, Callable[[str], _Fields | None]] = {
    2: _decode_2,
    3: _decode_3,
    4: _decode_4,
    5: _decode_5,
    6: _decode_6,
}


def parse_san(text: str, color: Color) -> ParsedMove:
    """Decode one movetext token played by *color*.

    Raises :class:`UnparseableMovetextError` naming *text* when the token
    matches no recognised form. ``is_en_passant`` is never set here; en
    passant can only be inferred from the board.
    """
    clean = text.rstrip(_ANNOTATION_GLYPHS)
    stripped = clean.rstrip(_CHECK_MARKS)
    is_check = stripped != clean
    clean = stripped.rstrip(_ANNOTATION_GLYPHS)

    castle = _CASTLES.get(clean)
    if castle is not None:
        return ParsedMove(
            text=text,
            piece_kind=PieceKind.KING,
            color=color,
            is_check=is_check,
            castle=castle,
        )

    decoder = _DECODERS.get(len(clean))
    if decoder is None:
        raise UnparseableMovetextError(text, f"unsupported length {len(clean)}")
    fields = decoder(clean)
    if fields is None:
        raise UnparseableMovetextError(text)
    return ParsedMove(text=text, color=color, is_check=is_check, **fields)
