"""Shared fixtures: a small Java source tree on disk."""

import pytest


PROJECT_FILES = {
    "src/main/java/com/acme/model/Entity.java": '''
package com.acme.model;

public abstract class Entity {
    /** Identifier of the entity. */
    public long getId() {
        return id;
    }
}
''',
    "src/main/java/com/acme/model/User.java": '''
package com.acme.model;

public class User extends Entity implements Serializable {
    public String getName() {
        return name;
    }

    public enum Role { ADMIN, MEMBER }
}
''',
    "src/main/java/com/acme/api/UserResource.java": '''
package com.acme.api;

import com.acme.model.User;

@Path("/users")
@Produces("application/json")
public class UserResource {

    /** Lists users. */
    @GET
    public List<User> list() {
        return null;
    }

    @POST
    @Consumes("application/json")
    public Response create(User user) {
        return null;
    }

    @GET
    @Path("/{id}")
    public User get(@PathParam("id") long id) {
        return null;
    }
}
''',
    "src/main/java/com/acme/api/Admin.java": '''
package com.acme.api;

public class Admin extends User {
}
''',
    "target/generated/Ignored.java": '''
package gen;

public class Ignored {
}
''',
    "README.md": "# Not Java\n",
}


@pytest.fixture
def java_project(tmp_path):
    """Write the sample tree under tmp_path/shop and return its path."""
    root = tmp_path / "shop"
    for rel_path, content in PROJECT_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def storage_dir(tmp_path):
    """Isolated analysis storage directory."""
    path = tmp_path / "storage"
    path.mkdir()
    return path
