"""
Static chessboard model: piece codec, coordinate mapping and FEN board decoding.
"""
