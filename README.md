# campuscravings

A terminal food ordering system for a campus canteen. Buyers pick meals from
the day's menu, choose delivery or reservation, and check out. A seller
registers, logs in, picks which day's menu is served, reads the order log and
sees the total of recorded sales.

## Install

```
pip install .
```

## Run

```
campuscravings
```

Options:

- `--data-dir PATH`: directory holding the seller account, orders and sales
  (default: `~/.campuscravings`).
- `--day N`: menu offered at start, `1` = Sunday ... `7` = Saturday
  (default: `1`).

The welcome page asks whether you are a buyer (1) or a seller (2).

**Buyers** enter their name and ID number, then see the numbered menu for the
current day. Every dish costs 60. For each item they choose delivery (plus 10
for that item) or reservation, a meal number and a quantity, and may keep
adding items. The checkout screen lists the items and the total; the total is
logged as a sale in whole pesos. If any item is for delivery, the buyer is
asked for a delivery address. Afterwards the buyer can exit, order again or
go back to the welcome page.

**Sellers** choose to log in or to register. Registering stores a name and
password, replacing any earlier account, and then goes on to the login. A
failed login ends the program. From the seller page a seller can:

1. change the food selection by choosing the day of the week,
2. view the order log,
3. view the total of logged sales,
4. go back to the welcome page.

After each action the seller can exit, return to the seller page or go to the
welcome page. Choosing to exit, from either side, shows a thank-you screen and
ends the program. End of input or Ctrl-C also ends it.

## Data files

Everything is plain text under the data directory:

| Path | Contents |
| --- | --- |
| `sellerdata/seller.txt` | seller name and password, one per line |
| `orderdata/ORDER.txt` | every order, with delivery addresses appended |
| `deliverydata/Order_<name>.txt` | the buyer's latest delivery receipt |
| `reservationdata/Order_<name>.txt` | the buyer's latest reservation receipt |
| `totalsales/sales.txt` | one checkout total per line |

## Using it as a library

- `campuscravings.menus`: `Day`, `Schedule`, `menu_for`, `format_menu`,
  `pick_meal`, `parse_day`, `UNIT_PRICE`
- `campuscravings.pricing`: `Mode`, `OrderLine`, `order_amount`,
  `checkout_total`, `format_line`, `classic_price`, `DELIVERY_FEE`
- `campuscravings.storage`: `DataStore`, `OrderRecord`, `StorageError`
- `campuscravings.terminal`: `Console`, `clear_terminal`
- `campuscravings.buyer.BuyerFlow` and `campuscravings.seller.SellerFlow`
- `campuscravings.cli`: `App`, `Navigation`, `main`

```python
from campuscravings.menus import Day, format_menu

print(format_menu(Day.MONDAY))
```

## Limitations

- There is a single seller account; registering again replaces it.
- The seller's password is stored as plain text.
- The chosen day's menu lasts only while the program runs; each start uses
  the `--day` option.
- Receipts are named after the buyer, so a later order by the same name
  replaces the earlier receipt.

## Tests

```
pip install .[test]
pytest
```