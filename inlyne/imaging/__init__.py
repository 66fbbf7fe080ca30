"""Image decoding, LZ4 compression and sizing."""