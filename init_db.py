from playarena.core.database import engine, init_db as create_tables


def init_db():
    print("🔄 Conectando a la base de datos...")

    # CUIDADO: esto borra TODOS los datos que haya ahora mismo.
    print("🗑️  Borrando tablas antiguas...")
    print("✨ Creando tablas nuevas (Users, Venues, Matches, Teams, Players, Products...)...")
    create_tables(bind=engine, drop=True)

    print("✅ ¡Base de datos lista y limpia!")


if __name__ == "__main__":
    init_db()
