import sys

# フォーマッタの実行順序（小さい値から実行）
MONEY = 30000
BASIC = sys.maxsize
