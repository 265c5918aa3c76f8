import logging
from pathlib import Path

from fieldabi import Abi, Values

EXAMPLES_ROOT = Path(__file__).parent
ABI = EXAMPLES_ROOT / "abi" / "book_example.json"
assert ABI.is_file()

logging.basicConfig(level=logging.DEBUG)

abi = Abi.from_json(ABI)


def main():
    create_book = abi.functions[0]

    # createBook(60, "olavm")
    input_data = abi.encode_input(create_book.signature(), [Values.U32(60), Values.String("olavm")])
    print("input words:", input_data)

    func, decoded = abi.decode_input(input_data)
    print(f"decode function input {func.name!r}")
    for name, param in decoded.reader().by_name.items():
        print(f"  {name:10s}: {param.value}")

    # getBookName(...) -> "hello"
    output_data = [5, 104, 101, 108, 108, 111, 6]
    _, decoded = abi.decode_output(abi.functions[1].signature(), output_data)
    print("decode function output", decoded.values())


if __name__ == "__main__":
    main()
