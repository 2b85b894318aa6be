"""Seed initial shoes and true-to-size ratings into the database."""
from shoesdb.db import connect
from shoesdb.keys import ById
from shoesdb.shoe import ShoeRepository
from shoesdb.truetosize import TrueToSizeRepository

INITIAL_SHOES = {
    "adidas Ultraboost": [3, 3, 4, 2, 3],
    "Nike Pegasus 40": [2, 3, 3, 3],
    "Brooks Ghost 15": [3, 4, 3],
    "HOKA Clifton 9": [4, 4, 3, 5],
}


def main():
    with connect() as store:
        shoes = ShoeRepository(store)
        ratings = TrueToSizeRepository(store)

        for name, values in INITIAL_SHOES.items():
            shoe_id = shoes.find_id(name)
            if shoe_id is None:
                shoes.insert([name])
                shoe_id = shoes.find_id(name)
                print(f"Created: {name} (id={shoe_id})")
            elif ratings.find(ById(shoe_id)):
                print(f"Skipping {name} - already exists with ratings")
                continue

            inserted = ratings.insert(values, shoe_id=shoe_id)
            print(f"Rated: {name} (id={shoe_id}) with {inserted} ratings")


if __name__ == "__main__":
    main()
