from html import escape
from urllib.parse import urlencode
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from aguli_admin.config import settings
from aguli_admin.security.auth import AdminUser, optional_user
from aguli_admin.services.backend import BackendError, get_backend
from aguli_admin.services.listing import filter_explore_posts, format_timestamp, paginate, STATUS_FILTERS
from .ads import fetch_ads
from .categories import fetch_categories
from .citizen import fetch_citizen_news
from .explore import fetch_explore_posts
from .livetv import fetch_channels
from .videos import fetch_video, fetch_videos

router = APIRouter()

LOGIN_PAGE = "/user-login"

NAV_ITEMS = [
    ("videos", "/users/videos-pages", "Videos"),
    ("categories", "/users/add-category", "Categories"),
    ("ads", "/users/ads", "Ads"),
    ("citizen", "/users/citizen", "Citizen News"),
    ("explore", "/users/explore", "Explore"),
    ("livetv", "/users/liveTv", "Live TV"),
    ("push", "/users/push-notifications", "Push"),
]

# --- HTML TEMPLATES ---

LAYOUT_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title} | Aguli TV Admin</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50 min-h-screen">
  <nav class="bg-white border-b">
    <div class="max-w-6xl mx-auto px-6 h-14 flex justify-between items-center">
      <div class="flex items-center gap-6">
        <div class="font-bold">AGULI TV</div>
        {nav}
      </div>
      <div class="flex items-center gap-4 text-sm">
        <span>{user_name}</span>
        <button onclick="logout()" class="text-gray-500 hover:text-black">Logout</button>
      </div>
    </div>
  </nav>
  <main class="max-w-6xl mx-auto px-6 py-8 space-y-6">
    {content}
  </main>
  <div id="toast" class="hidden fixed bottom-6 right-6 px-4 py-2 rounded text-white"></div>
  <script>
    function toast(message, ok) {{
      const el = document.getElementById('toast');
      el.innerText = message;
      el.className = 'fixed bottom-6 right-6 px-4 py-2 rounded text-white ' + (ok ? 'bg-green-600' : 'bg-red-600');
      setTimeout(() => el.classList.add('hidden'), 3000);
    }}

    async function api(method, url, body, isForm) {{
      const opts = {{ method, headers: {{}} }};
      if (body !== undefined) {{
        if (isForm) {{
          opts.body = body;
        }} else {{
          opts.headers['Content-Type'] = 'application/json';
          opts.body = JSON.stringify(body);
        }}
      }}
      const res = await fetch(url, opts);
      const data = await res.json().catch(() => ({{}}));
      if (!res.ok) {{
        throw new Error(data.detail || 'Request failed');
      }}
      return data;
    }}

    async function removeItem(url, prompt) {{
      if (!window.confirm(prompt)) return;
      try {{
        const data = await api('DELETE', url);
        toast(data.message || 'Deleted', true);
        setTimeout(() => window.location.reload(), 600);
      }} catch (e) {{
        toast(e.message, false);
      }}
    }}

    async function logout() {{
      await fetch('/auth/logout', {{ method: 'POST' }});
      window.location.href = '{login_page}';
    }}
  </script>
  {scripts}
</body>
</html>"""

LOGIN_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Sign in | Aguli TV Admin</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <script src="https://accounts.google.com/gsi/client" async defer></script>
</head>
<body class="min-h-screen flex items-center justify-center bg-gray-50">
  <div class="bg-white shadow rounded p-8 w-full max-w-md text-center space-y-4">
    <h1 class="text-2xl font-bold">Welcome to Video Gallery</h1>
    <div id="g_id_onload" data-client_id="{client_id}" data-callback="handleGoogleSignIn"></div>
    <div class="g_id_signin" data-type="standard"></div>
    <p id="error" class="text-red-600 text-sm"></p>
  </div>
  <script>
    async function handleGoogleSignIn(response) {{
      const res = await fetch('/auth/google/signin', {{
        method: 'POST',
        headers: {{ 'Content-Type': 'application/json' }},
        body: JSON.stringify({{ credential: response.credential }})
      }});
      const data = await res.json().catch(() => ({{}}));
      if (res.ok && data.ok) {{
        window.location.href = data.redirect;
      }} else {{
        document.getElementById('error').innerText = data.detail || 'Login failed';
      }}
    }}
  </script>
</body>
</html>"""

COMPOSE_SCRIPT = """<script>
  const MAX_IMAGES = {max_images};
  let sid = null;
  let previews = {{}};
  let current = null;
  let dragActive = false;

  async function openSession() {{
    render(await api('POST', '/api/explore/compose'));
  }}

  function render(session) {{
    current = session;
    sid = session.id;
    const grid = document.getElementById('images');
    grid.innerHTML = '';
    session.images.forEach((img) => {{
      const tile = document.createElement('div');
      tile.className = 'relative border rounded p-2 cursor-move bg-white';
      tile.draggable = true;
      tile.dataset.index = img.index;
      if (session.dragging === img.index) tile.classList.add('opacity-50');
      const src = previews[img.id] ? `<img src="${{previews[img.id]}}" class="w-full h-40 object-cover rounded">` : '';
      tile.innerHTML = `${{src}}<div class="filename text-xs truncate"></div>
        <button type="button" class="absolute top-1 right-1 bg-red-600 text-white rounded px-2" onclick="removeImage(${{img.index}})">&times;</button>`;
      tile.querySelector('.filename').textContent = img.filename;
      tile.addEventListener('dragstart', async () => {{
        dragActive = true;
        // a drag whose end was never seen is closed before the new one starts
        if (current.dragging !== null) await send('POST', 'drag/end');
        send('POST', 'drag/start', {{ index: img.index }});
      }});
      tile.addEventListener('dragover', (e) => {{
        e.preventDefault();
        const target = Number(tile.dataset.index);
        if (session.dragging !== null && session.dragging !== target) send('POST', 'drag/hover', {{ index: target }});
      }});
      grid.appendChild(tile);
    }});
    document.getElementById('count').innerText = `${{session.images.length}} / ${{MAX_IMAGES}}`;
  }}

  async function send(method, path, body) {{
    try {{
      render(await api(method, `/api/explore/compose/${{sid}}/${{path}}`, body));
    }} catch (e) {{
      toast(e.message, false);
    }}
  }}

  async function removeImage(index) {{
    await send('DELETE', `images/${{index}}`);
  }}

  async function addFiles(fileList) {{
    const files = Array.from(fileList).filter((f) => f.type.startsWith('image/'));
    if (!files.length) return;
    const form = new FormData();
    files.forEach((f) => form.append('images', f));
    try {{
      const session = await api('POST', `/api/explore/compose/${{sid}}/images`, form, true);
      const fresh = session.images.slice(-files.length);
      fresh.forEach((img) => {{
        const file = files.find((f) => f.name === img.filename);
        if (file && !previews[img.id]) previews[img.id] = URL.createObjectURL(file);
      }});
      render(session);
    }} catch (e) {{
      toast(e.message, false);
    }}
  }}

  async function saveFields() {{
    await api('PATCH', `/api/explore/compose/${{sid}}`, {{
      title: document.getElementById('title').value,
      description: document.getElementById('description').value,
      status: document.getElementById('status').value
    }});
  }}

  async function submitPost(e) {{
    e.preventDefault();
    const btn = document.getElementById('submit');
    btn.disabled = true;
    try {{
      await saveFields();
      const result = await api('POST', `/api/explore/compose/${{sid}}/submit`);
      toast(result.message, true);
      previews = {{}};
      document.getElementById('compose').reset();
      render(result.session);
    }} catch (err) {{
      toast(err.message, false);
    }} finally {{
      btn.disabled = false;
    }}
  }}

  const zone = document.getElementById('dropzone');
  zone.addEventListener('dragover', (e) => e.preventDefault());
  zone.addEventListener('drop', (e) => {{ e.preventDefault(); addFiles(e.dataTransfer.files); }});
  zone.addEventListener('click', () => document.getElementById('picker').click());
  document.getElementById('picker').addEventListener('change', (e) => addFiles(e.target.files));
  document.getElementById('compose').addEventListener('submit', submitPost);
  // tiles are rebuilt on every render, so the dragged node may be detached before release
  function endDrag() {{
    if (!dragActive && (!current || current.dragging === null)) return;
    dragActive = false;
    send('POST', 'drag/end');
  }}
  document.addEventListener('dragover', (e) => e.preventDefault());
  document.addEventListener('drop', (e) => {{ e.preventDefault(); endDrag(); }});
  document.addEventListener('dragend', endDrag);
  window.addEventListener('beforeunload', () => {{
    if (sid) fetch(`/api/explore/compose/${{sid}}`, {{ method: 'DELETE', keepalive: true }});
  }});
  openSession();
</script>"""

def _nav(active: str) -> str:
    links = []
    for key, href, label in NAV_ITEMS:
        cls = "font-semibold text-black" if key == active else "text-gray-500 hover:text-black"
        links.append(f'<a href="{href}" class="text-sm {cls}">{label}</a>')
    return "\n".join(links)

def render_page(title: str, active: str, user: AdminUser, content: str, scripts: str = "") -> HTMLResponse:
    return HTMLResponse(LAYOUT_HTML.format(
        title=escape(title),
        nav=_nav(active),
        user_name=escape(user.name or user.email or ""),
        content=content,
        login_page=LOGIN_PAGE,
        scripts=scripts,
    ))

def _error_block(message: str) -> str:
    return f'<div class="bg-red-50 text-red-700 border border-red-200 rounded p-4">{escape(message)}</div>'

def _card(title: str, body: str, actions: str = "") -> str:
    return f"""
    <div class="bg-white shadow rounded">
      <div class="flex justify-between items-center p-4 border-b">
        <h1 class="text-xl font-semibold">{escape(title)}</h1>
        <div>{actions}</div>
      </div>
      <div class="p-4">{body}</div>
    </div>"""

def _table(headers: list[str], rows: list[list[str]], empty: str) -> str:
    if not rows:
        return f'<div class="text-center text-gray-500 py-12">{escape(empty)}</div>'
    head = "".join(f'<th class="text-left p-2">{escape(h)}</th>' for h in headers)
    body = "".join("<tr class=\"border-t\">" + "".join(f'<td class="p-2">{c}</td>' for c in row) + "</tr>" for row in rows)
    return f'<table class="w-full text-sm"><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>'

def _delete_button(url: str, prompt: str) -> str:
    return f"""<button class="text-red-600" onclick="removeItem('{url}', '{escape(prompt)}')">Delete</button>"""

def _form_script(form_id: str, method: str, url: str, as_json: bool = True, redirect: str | None = None) -> str:
    go = f"window.location.href = '{redirect}';" if redirect else "setTimeout(() => window.location.reload(), 600);"
    if as_json:
        body = "Object.fromEntries(new FormData(form).entries())"
    else:
        body = "new FormData(form)"
    return f"""<script>
  document.getElementById('{form_id}').addEventListener('submit', async (e) => {{
    e.preventDefault();
    const form = e.target;
    const url = form.dataset.url || '{url}';
    const method = form.dataset.method || '{method}';
    try {{
      const data = await api(method, url, {body}, {str(not as_json).lower()});
      toast(data.message || 'Saved', true);
      {go}
    }} catch (err) {{
      toast(err.message, false);
    }}
  }});
</script>"""

# --- PAGES ---

@router.get("/", include_in_schema=False)
def root(user: AdminUser | None = Depends(optional_user)):
    return RedirectResponse(url="/users/videos-pages" if user else LOGIN_PAGE)

@router.get(LOGIN_PAGE, response_class=HTMLResponse)
def login_page(user: AdminUser | None = Depends(optional_user)):
    if user:
        return RedirectResponse(url="/users/videos-pages")
    return HTMLResponse(LOGIN_HTML.format(client_id=escape(settings.google_client_id or "")))

@router.get("/users/add-category", response_class=HTMLResponse)
def categories_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        categories = fetch_categories(get_backend(user.backend_token))
        rows = [[
            escape(str(c.get("cat_name", ""))),
            escape(str(c.get("cat_code", ""))),
            escape(str(c.get("cat_status", ""))),
            escape(str(c.get("cat_order", ""))),
            escape(format_timestamp(c.get("update_date"))),
            _delete_button(f"/api/categories/{escape(str(c.get('_id')))}", "Are you sure you want to delete this category?"),
        ] for c in categories]
        listing = _table(["Name", "Code", "Status", "Order", "Updated", ""], rows, "No categories found")
    except BackendError as e:
        listing = _error_block(e.message or "Failed to fetch categories")

    form = """
    <form id="category-form" class="grid grid-cols-2 gap-3 mb-6">
      <input name="cat_name" placeholder="Category name" class="border rounded p-2" required>
      <input name="cat_thumb" placeholder="Thumbnail link" class="border rounded p-2" required>
      <select name="cat_status" class="border rounded p-2"><option value="active">Active</option><option value="inactive">Inactive</option></select>
      <input name="cat_order" type="number" value="0" class="border rounded p-2">
      <button class="col-span-2 bg-black text-white rounded p-2">Add Category</button>
    </form>"""
    return render_page("Categories", "categories", user, _card("Add Category", form + listing),
                       _form_script("category-form", "POST", "/api/categories"))

@router.get("/users/ads", response_class=HTMLResponse)
def ads_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        ads = fetch_ads(get_backend(user.backend_token))
        rows = [[
            escape(str(a.get("ads_sequence", ""))),
            escape(str(a.get("ads_name", ""))),
            escape(str(a.get("ads_type", ""))),
            escape(str(a.get("ads_screen", ""))),
            f'<a class="text-blue-600" href="{escape(str(a.get("ads_link", "")))}">link</a>',
            escape(str(a.get("ads_status", ""))),
            _delete_button(f"/api/ads/{escape(str(a.get('_id')))}", "Are you sure you want to delete this ad?"),
        ] for a in ads]
        listing = _table(["#", "Name", "Type", "Screen", "Link", "Status", ""], rows, "No ads found")
    except BackendError as e:
        listing = _error_block(e.message or "Failed to fetch ads")

    form = """
    <form id="ad-form" class="grid grid-cols-2 gap-3 mb-6" enctype="multipart/form-data">
      <input name="ads_name" placeholder="Ad name" class="border rounded p-2">
      <input name="ads_type" placeholder="Type" class="border rounded p-2">
      <input name="ads_screen" placeholder="Screen" class="border rounded p-2">
      <input name="ads_link" placeholder="Link" class="border rounded p-2">
      <select name="ads_status" class="border rounded p-2"><option value="active">Active</option><option value="inactive">Inactive</option></select>
      <input name="ads_sequence" type="number" value="0" class="border rounded p-2">
      <input name="ads_image" type="file" accept="image/*" class="col-span-2">
      <button class="col-span-2 bg-black text-white rounded p-2">Add Ad</button>
    </form>"""
    return render_page("Ads", "ads", user, _card("Advertisements", form + listing),
                       _form_script("ad-form", "POST", "/api/ads", as_json=False))

@router.get("/users/citizen", response_class=HTMLResponse)
def citizen_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        news = fetch_citizen_news(get_backend(user.backend_token))
        rows = [[
            escape(str(n.get("post_name", ""))),
            escape(str(n.get("profile_name", ""))),
            escape(str(n.get("phone_number", ""))),
            escape(str(n.get("post_status", ""))),
            escape(format_timestamp(n.get("created_at"))),
            _delete_button(f"/api/citizen/{escape(str(n.get('_id')))}", "Are you sure you want to delete this news?"),
        ] for n in news]
        listing = _table(["Title", "Reporter", "Phone", "Status", "Submitted", ""], rows, "No news available")
    except BackendError as e:
        listing = _error_block(e.message or "Failed to load news")
    return render_page("Citizen News", "citizen", user, _card("Citizen News", listing))

@router.get("/users/explore", response_class=HTMLResponse)
def explore_page(
    search: str = "",
    status: str = Query("all"),
    page: int = 1,
    user: AdminUser | None = Depends(optional_user),
):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    if status not in STATUS_FILTERS:
        status = "all"
    try:
        posts = fetch_explore_posts(get_backend(user.backend_token))
        result = paginate(filter_explore_posts(posts, search, status), page, settings.explore_page_size)
        rows = [[
            escape(str(p.get("explore_title", ""))),
            escape(str(p.get("explore_status", ""))),
            escape(str(len(p.get("explore_thumb") or []))),
            escape(str(p.get("explore_likes", ""))),
            escape(format_timestamp(p.get("createdat"))),
            _delete_button(f"/api/explore/{escape(str(p.get('_id')))}", "Are you sure you want to delete this post?"),
        ] for p in result["items"]]
        listing = _table(["Title", "Status", "Images", "Likes", "Created", ""], rows, "No posts found")
        pager = f'<div class="text-sm text-gray-500 mt-4">Page {result["page"]} of {result["total_pages"]}</div>'
        if result["page"] > 1:
            pager += f'<a class="mr-4" href="?{escape(urlencode({"search": search, "status": status, "page": result["page"] - 1}))}">Previous</a>'
        if result["page"] < result["total_pages"]:
            pager += f'<a href="?{escape(urlencode({"search": search, "status": status, "page": result["page"] + 1}))}">Next</a>'
        listing += pager
    except BackendError as e:
        listing = _error_block(e.message or "Failed to fetch explore posts")

    options = "".join(f'<option value="{s}" {"selected" if s == status else ""}>{s.title()}</option>' for s in STATUS_FILTERS)
    filters = f"""
    <form method="get" class="flex gap-3 mb-6">
      <input name="search" value="{escape(search)}" placeholder="Search posts..." class="border rounded p-2 flex-1">
      <select name="status" class="border rounded p-2">{options}</select>
      <button class="border rounded px-4">Filter</button>
    </form>"""
    actions = '<a href="/users/explore/add-explore" class="bg-black text-white rounded px-4 py-2 text-sm">Create Post</a>'
    return render_page("Explore", "explore", user, _card("Explore Posts", filters + listing, actions))

@router.get("/users/explore/add-explore", response_class=HTMLResponse)
def add_explore_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    form = f"""
    <form id="compose" class="space-y-4">
      <input id="title" placeholder="Title" class="border rounded p-2 w-full" required>
      <textarea id="description" rows="4" placeholder="Description" class="border rounded p-2 w-full" required></textarea>
      <select id="status" class="border rounded p-2 w-full"><option value="active">Active</option><option value="inactive">Inactive</option></select>
      <div class="text-sm font-medium">Images (Max {settings.max_explore_images}) <span id="count"></span></div>
      <div id="dropzone" class="border-2 border-dashed rounded p-6 text-center cursor-pointer text-gray-600">
        Drag &amp; drop images here, or click to select files
        <p class="text-sm text-gray-500 mt-2">You can upload up to {settings.max_explore_images} images and reorder them after upload</p>
      </div>
      <input id="picker" type="file" accept="image/*" multiple class="hidden">
      <div id="images" class="grid grid-cols-2 md:grid-cols-4 gap-4"></div>
      <button id="submit" class="w-full bg-black text-white rounded p-2">Create Post</button>
    </form>"""
    return render_page("Create Explore Post", "explore", user, _card("Create Explore Post", form),
                       COMPOSE_SCRIPT.format(max_images=settings.max_explore_images))

@router.get("/users/liveTv", response_class=HTMLResponse)
def livetv_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        channels = fetch_channels(get_backend(user.backend_token))
        rows = [[
            escape(str(c.get("live_tv_name", ""))),
            f'<a class="text-blue-600" href="{escape(str(c.get("live_tv_link", "")))}">{escape(str(c.get("live_tv_link", "")))}</a>',
            _delete_button(f"/api/livetv/{escape(str(c.get('_id')))}", "Are you sure you want to delete this channel? This action cannot be undone."),
        ] for c in channels]
        listing = _table(["Channel", "Link", ""], rows, "No channels found")
    except BackendError as e:
        listing = _error_block(e.message or "Failed to fetch channels")
    form = """
    <form id="channel-form" class="flex gap-3 mb-6">
      <input name="live_tv_name" placeholder="Channel name" class="border rounded p-2 flex-1" required>
      <input name="live_tv_link" placeholder="Stream link" class="border rounded p-2 flex-1" required>
      <button class="bg-black text-white rounded px-4">Add Channel</button>
    </form>"""
    return render_page("Live TV", "livetv", user, _card("Live TV Channels", form + listing),
                       _form_script("channel-form", "POST", "/api/livetv"))

@router.get("/users/push-notifications", response_class=HTMLResponse)
def push_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    form = """
    <form id="push-form" class="space-y-3">
      <input name="title" placeholder="Title" class="border rounded p-2 w-full" required>
      <input name="body" placeholder="Body" class="border rounded p-2 w-full" required>
      <select name="screen" class="border rounded p-2 w-full"><option value="newsDetails">News Details</option></select>
      <input name="news_id" placeholder="News ID" class="border rounded p-2 w-full" required>
      <input name="thumbnail_url" placeholder="Thumbnail URL" class="border rounded p-2 w-full">
      <button class="w-full bg-black text-white rounded p-2">Send Notification</button>
    </form>"""
    return render_page("Push Notifications", "push", user, _card("Send Push Notification", form),
                       _form_script("push-form", "POST", "/api/push-notifications/send"))

@router.get("/users/videos-pages", response_class=HTMLResponse)
def videos_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        videos = fetch_videos(get_backend(user.backend_token))
        rows = [[
            escape(str(v.get("video_tittle", ""))),
            escape(str(v.get("video_cat", ""))),
            escape(str(v.get("video_status", ""))),
            escape(str(v.get("video_views", ""))),
            escape(format_timestamp(v.get("createdat"))),
            f'<a class="text-blue-600 mr-3" href="/users/videos-pages/{escape(str(v.get("_id")))}/edit">Edit</a>'
            + _delete_button(f"/api/videos/{escape(str(v.get('_id')))}", "Are you sure you want to delete this video?"),
        ] for v in videos]
        listing = _table(["Title", "Category", "Status", "Views", "Created", ""], rows, "No videos found")
    except BackendError as e:
        listing = _error_block(e.message or "Failed to fetch videos")
    actions = '<a href="/users/videos-pages/add-video" class="bg-black text-white rounded px-4 py-2 text-sm">Add Video</a>'
    return render_page("Videos", "videos", user, _card("Videos", listing, actions))

def _video_form(form_id: str, video: dict, submit_label: str) -> str:
    def val(key: str) -> str:
        return escape(str(video.get(key) or ""))
    status = video.get("video_status") or "active"
    options = "".join(
        f'<option value="{s}" {"selected" if s == status else ""}>{s.title()}</option>' for s in ("active", "inactive")
    )
    return f"""
    <form id="{form_id}" class="space-y-3" enctype="multipart/form-data">
      <input name="video_tittle" value="{val('video_tittle')}" placeholder="Title" class="border rounded p-2 w-full" required>
      <textarea name="video_description" rows="4" placeholder="Description" class="border rounded p-2 w-full">{val('video_description')}</textarea>
      <input name="video_cat" value="{val('video_cat')}" placeholder="Category" class="border rounded p-2 w-full">
      <select name="video_status" class="border rounded p-2 w-full">{options}</select>
      <input name="video_url" value="{val('video_url')}" placeholder="Video URL (or upload below)" class="border rounded p-2 w-full">
      <input name="video" type="file" accept="video/*">
      <input name="thumbnail_url" value="{val('video_thumb')}" placeholder="Thumbnail URL (or upload below)" class="border rounded p-2 w-full">
      <input name="thumbnail" type="file" accept="image/*">
      <button class="w-full bg-black text-white rounded p-2">{submit_label}</button>
    </form>"""

@router.get("/users/videos-pages/add-video", response_class=HTMLResponse)
def add_video_page(user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    return render_page("Add Video", "videos", user, _card("Upload Video", _video_form("video-form", {}, "Upload Video")),
                       _form_script("video-form", "POST", "/api/videos", as_json=False))

@router.get("/users/videos-pages/{video_id}/edit", response_class=HTMLResponse)
def edit_video_page(video_id: str, user: AdminUser | None = Depends(optional_user)):
    if not user:
        return RedirectResponse(url=LOGIN_PAGE)
    try:
        video = fetch_video(get_backend(user.backend_token), video_id)
    except BackendError as e:
        return render_page("Edit Video", "videos", user, _error_block(e.message or "Failed to fetch video"))
    if not video:
        return render_page("Edit Video", "videos", user, _error_block("Video not found"))
    return render_page("Edit Video", "videos", user, _card("Edit Video", _video_form("video-form", video, "Save Changes")),
                       _form_script("video-form", "PUT", f"/api/videos/{escape(video_id)}", as_json=False,
                                    redirect="/users/videos-pages"))
