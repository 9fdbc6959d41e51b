"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessreplay.core.enums import Color, PieceKind
from chessreplay.core.errors import EmptySquareError, OutOfBoundsError
from chessreplay.core.piece import EMPTY, Piece
from chessreplay.core.types import BOARD_SIZE, Coord

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid; every square holds exactly one :class:`Piece`.

    An empty square holds :data:`~chessreplay.core.piece.EMPTY`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[list[Piece]] = [
            [EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Piece:
        if not coord.in_bounds:
            raise OutOfBoundsError(coord)
        return self._squares[coord.row][coord.col]

    def __setitem__(self, coord: Coord, piece: Piece) -> None:
        if not coord.in_bounds:
            raise OutOfBoundsError(coord)
        self._squares[coord.row][coord.col] = piece

    def is_empty(self, coord: Coord) -> bool:
        return self[coord].is_empty

    def occupied(self) -> Iterator[tuple[Coord, Piece]]:
        """Yield ``(coord, piece)`` for every non-empty square, a1 to h8."""
        for row, rank in enumerate(self._squares):
            for col, piece in enumerate(rank):
                if not piece.is_empty:
                    yield Coord(row, col), piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, kind: PieceKind | None = None) -> list[Coord]:
        """Squares occupied by *color*'s pieces, optionally of one *kind*."""
        return [
            coord
            for coord, piece in self.occupied()
            if piece.color == color and (kind is None or piece.kind == kind)
        ]

    def count(self, color: Color, kind: PieceKind) -> int:
        return len(self.pieces(color, kind))

    def find_king(self, color: Color) -> Coord | None:
        for coord, piece in self.occupied():
            if piece.kind == PieceKind.KING and piece.color == color:
                return coord
        return None

    def king_square(self, color: Color) -> Coord:
        """Return the king square for *color*."""
        coord = self.find_king(color)
        if coord is None:
            raise ValueError(f"No {color.name} king on board")
        return coord

    # -- Mutation -----------------------------------------------------------

    def clear(self) -> None:
        self._squares = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def setup(self) -> None:
        """Reset to the standard starting position."""
        self.clear()
        for col, kind in enumerate(_BACK_RANK):
            self._squares[0][col] = Piece(kind, Color.WHITE)
            self._squares[1][col] = Piece(PieceKind.PAWN, Color.WHITE)
            self._squares[6][col] = Piece(PieceKind.PAWN, Color.BLACK)
            self._squares[7][col] = Piece(kind, Color.BLACK)

    def move_piece(self, from_: Coord, to: Coord) -> None:
        """Relocate the piece on *from_* to *to*, replacing any occupant.

        Every piece of the mover's color loses its en passant eligibility,
        then the moved piece regains it if it is a pawn that advanced two rows.
        """
        if not from_.in_bounds:
            raise OutOfBoundsError(from_)
        if not to.in_bounds:
            raise OutOfBoundsError(to)

        piece = self._squares[from_.row][from_.col]
        if piece.is_empty:
            raise EmptySquareError(from_)

        self._squares[to.row][to.col] = piece
        self._squares[from_.row][from_.col] = EMPTY

        for rank in self._squares:
            for col, other in enumerate(rank):
                if other.en_passant_eligible and other.color == piece.color:
                    rank[col] = other.with_en_passant(False)

        if piece.kind == PieceKind.PAWN and abs(to.row - from_.row) == 2:
            self._squares[to.row][to.col] = piece.with_en_passant(True)

    def copy(self) -> Board:
        b = Board()
        b._squares = [rank.copy() for rank in self._squares]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.setup()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = " ".join(str(p) for p in self._squares[row])
            rows.append(f"{row + 1} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
