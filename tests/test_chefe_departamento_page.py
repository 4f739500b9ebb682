import pytest

from crudempresa.chefe_departamento import ChefeDepartamento, load_chefes
from crudempresa.departamento import Departamento
from crudempresa.funcionario import Funcionario
from crudempresa.storage import InvalidReferenceError, NotFoundError
from crudempresa.views.chefe_departamento_page import (
    chefe_card,
    chefe_from_form,
    create_chefe,
    delete_chefe,
    empty_chefe_files,
    update_chefe,
)


@pytest.fixture
def data_dir(tmp_path):
    Departamento(id=1, nome="Vendas", chefe_id=4).save(tmp_path)
    Funcionario(
        id="A",
        nome="Alice",
        cpf="123.456.789-00",
        cep="12345-678",
        salario="5000.00",
        data_nascimento="1990-01-01",
        sexo="Feminino",
        departamento_id=1,
    ).save([1], tmp_path)
    return tmp_path


def test_chefe_from_form_parses_id():
    assert chefe_from_form({"id": "3", "funcionario_id": "A"}) == ChefeDepartamento(3, "A")


@pytest.mark.parametrize("bad", ["", "abc", " 3", "3.5"])
def test_chefe_from_form_rejects_bad_id(bad):
    with pytest.raises(ValueError):
        chefe_from_form({"id": bad, "funcionario_id": "A"})


def test_create_chefe_stores_record(data_dir):
    message = create_chefe({"id": "1", "funcionario_id": "A"}, data_dir)
    assert message == "Chefe de departamento com ID 1 salvo com sucesso."
    assert load_chefes(data_dir) == [ChefeDepartamento(1, "A")]


def test_create_chefe_unknown_employee(data_dir):
    with pytest.raises(InvalidReferenceError):
        create_chefe({"id": "1", "funcionario_id": "Z"}, data_dir)
    assert load_chefes(data_dir) == []


def test_update_chefe_replaces_record(data_dir):
    create_chefe({"id": "2", "funcionario_id": "A"}, data_dir)
    message = update_chefe({"id": "2", "funcionario_id": "D"}, data_dir)
    assert message == "Chefe de departamento com ID 2 atualizado com sucesso."
    assert load_chefes(data_dir) == [ChefeDepartamento(2, "D")]


def test_delete_chefe_removes_record(data_dir):
    create_chefe({"id": "1", "funcionario_id": "A"}, data_dir)
    delete_chefe({"id": "1", "funcionario_id": ""}, data_dir)
    assert load_chefes(data_dir) == []


def test_delete_missing_chefe(tmp_path):
    with pytest.raises(NotFoundError):
        delete_chefe({"id": "9"}, tmp_path)


def test_chefe_card():
    assert chefe_card(ChefeDepartamento(7, "B")) == ("ID do Chefe: 7", "FuncionárioID: B")


def test_empty_chefe_files(tmp_path):
    for name in ("chefes_departamento.json", "Departamentos.json", "projetos.json"):
        (tmp_path / name).write_text('[{"id": 1}]', encoding="utf-8")
    empty_chefe_files(tmp_path)
    for name in ("chefes_departamento.json", "Departamentos.json", "projetos.json"):
        assert (tmp_path / name).read_text(encoding="utf-8") == "[]"