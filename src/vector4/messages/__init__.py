"""Message models exchanged as text, msgpack or packed binary."""
