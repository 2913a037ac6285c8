"""JavaScript functions used for DOM snapshots and clipboard access."""

SNAPSHOT_DOM_SCRIPT = """
function snapshotElement(elem, skipTags) {
    // Safely get tag name
    const tagName = (elem.tagName && typeof elem.tagName.toLowerCase === 'function')
        ? elem.tagName.toLowerCase()
        : '';

    // Get CSS properties that affect visibility
    const style = window.getComputedStyle(elem);

    const node = {
        tagName: tagName,
        id: elem.id || '',
        className: elem.getAttribute('class') || '',
        texts: [],
        visibility: {
            display: style.display,
            visibility: style.visibility,
            opacity: style.opacity
        },
        children: []
    };

    // Skipped elements are reported but never expanded
    if (skipTags.indexOf(tagName) !== -1) {
        return node;
    }

    for (const child of elem.childNodes) {
        if (child.nodeType === Node.TEXT_NODE) {
            node.texts.push(child.textContent || '');
        } else if (child.nodeType === Node.ELEMENT_NODE) {
            node.children.push(snapshotElement(child, skipTags));
        }
    }

    return node;
}

if (!document.body) {
    return null;
}

return snapshotElement(document.body, arguments[0] || []);
"""

WRITE_CLIPBOARD_SCRIPT = """
const text = arguments[0];
const done = arguments[arguments.length - 1];

if (!navigator.clipboard || !navigator.clipboard.writeText) {
    done({success: false, error: 'navigator.clipboard is not available'});
    return;
}

navigator.clipboard.writeText(text)
    .then(() => done({success: true}))
    .catch(err => done({
        success: false,
        error: (err && err.name ? err.name + ': ' : '') + (err && err.message ? err.message : String(err))
    }));
"""

FALLBACK_COPY_SCRIPT = """
const text = arguments[0];

try {
    const textArea = document.createElement('textarea');
    textArea.value = text;
    textArea.style.top = '0';
    textArea.style.left = '0';
    textArea.style.position = 'fixed';
    textArea.style.opacity = '0';

    document.body.appendChild(textArea);
    textArea.focus();
    textArea.select();

    const successful = document.execCommand('copy');
    document.body.removeChild(textArea);

    return successful
        ? {success: true}
        : {success: false, error: 'document.execCommand("copy") returned false'};
} catch (err) {
    return {success: false, error: err && err.message ? err.message : String(err)};
}
"""
