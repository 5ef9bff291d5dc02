from peewee import CharField, DateTimeField, IntegerField, Model, TextField


class BaseModel(Model):
    """Sin base fija: `init_db` enlaza los modelos a la conexión del proceso."""


class UsuarioModel(BaseModel):
    id = CharField(primary_key=True)
    email = CharField(unique=True)
    password_hash = CharField()
    nombre = CharField(default="", index=True)
    rol = CharField()
    creado_en = DateTimeField()
    actualizado_en = DateTimeField()

    class Meta:
        table_name = "usuarios"


class TareaModel(BaseModel):
    id = CharField(primary_key=True)
    titulo = CharField()
    descripcion = TextField(default="")
    asignada_a = CharField(index=True)
    creada_por = CharField()
    estado = CharField()
    creada_en = DateTimeField(index=True)
    actualizada_en = DateTimeField()
    version = IntegerField(default=1)

    class Meta:
        table_name = "tareas"


MODELOS = [UsuarioModel, TareaModel]
