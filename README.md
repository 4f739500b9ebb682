# crudempresa

A small desktop application for keeping company records: employees
(*funcionários*), departments (*departamentos*), department heads
(*chefes de departamento*), employee–project links and projects
(*projetos*).

Every table is kept as a JSON file under `<data dir>/json/`, and after
each change a plain text copy of the table is rewritten under
`<data dir>/txt/`, one record per line. The main window shows those text
copies as a tree, and the employee, department, department-head and
project tables each have a window with fields for creating, changing,
listing and deleting records.

## Installation

```
pip install .
```

The interface uses tkinter from the standard library; nothing else is
required.

## Running

```
crudempresa
```

Options:

- `--data-dir DIR` – directory holding the data files (default `data`,
  relative to the current directory).
- `--no-gui` – only run the demo sequence, without opening a window.

On every start the command first runs a fixed demo sequence
(`crudempresa.app.seed_demo_data`): it saves two employees, three
departments, three department heads, three employee–project links and
three projects, then updates and deletes some of them. Each step's
outcome, success or refusal, is printed. After that the main window opens
with one button per table and a tree of the text files.

A table window checks its fields as you type and shows a message beside a
field whose text does not fit (CPF as `000.000.000-00`, CEP as
`00000-000`, dates as `DD/MM/AAAA`, numeric fields as digits only); the
check only warns and does not block an action. The outcome of each action
appears on the window's result line. A numeric field that cannot be read
as a whole number stops the action and is reported on the console.

Closing a table window (rather than pressing *Voltar*) writes an empty
JSON list (`[]`) into a fixed set of files placed directly in the data
directory, such as `data/projetos.json`. The tables themselves are read
from `data/json/`, so their records are not affected.

## Rules enforced

- IDs are unique within each table; saving a record whose ID already
  exists is refused.
- An employee needs a CPF not already used and a department ID that
  exists; once at least one employee is stored, every field must also be
  filled in.
- A department head needs an existing employee ID; once at least one head
  is stored, a non-zero ID and an employee ID are both required.
- A project needs an existing department ID and an existing employee ID.
- Employee–project links are only checked for a unique ID.
- Updating or deleting a record whose ID is not stored is refused.

## Using the records from Python

The record classes can be used without the interface. `save`, `update`
and `delete` return a success message; refusals raise subclasses of
`crudempresa.storage.CrudError` (`DuplicateIdError`, `NotFoundError`,
`MissingFieldsError`, `InvalidReferenceError`).

```python
from crudempresa.departamento import Departamento, departamento_ids, load_departamentos
from crudempresa.storage import CrudError

data_dir = "dados"

vendas = Departamento.from_dict({"id": 1, "nome": "Vendas", "chefe_id": 4})
print(vendas.save(data_dir))

print(departamento_ids(data_dir))
for departamento in load_departamentos(data_dir):
    print(departamento.txt_line())

try:
    vendas.save(data_dir)
except CrudError as error:
    print(error)
```

The record modules are `crudempresa.funcionario`,
`crudempresa.departamento`, `crudempresa.chefe_departamento`,
`crudempresa.funcionario_projeto` and `crudempresa.projeto`; each has a
`load_*` and a `list_*` function, and `crudempresa.storage.JsonTable`
does the file handling behind them.

`crudempresa.fields` holds the field checks (`validate_field`) and the
helpers `format_cpf`, `format_cep` and `format_date`, which turn bare
digits into punctuated forms.

## What it does not do

Employee–project links have no window of their own; they can only be
managed from Python or through the demo sequence.