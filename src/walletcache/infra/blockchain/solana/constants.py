"""Solana program ids and unit constants."""

LAMPORTS_PER_SOL = 1_000_000_000

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"

# Scanned in this order; first occurrence of a mint wins on dedup
TOKEN_PROGRAM_IDS: tuple[str, ...] = (TOKEN_PROGRAM_ID, TOKEN_2022_PROGRAM_ID)

WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"

METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
